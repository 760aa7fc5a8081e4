import pytest

from ecfspooler.bematech_flags import (
    ExtendedStatus,
    FiscalFlags,
    FiscalFlags3,
    PrinterType,
)


def test_printer_type_lookup_by_code():
    assert PrinterType(1) is PrinterType.ECF_GAVETA_AUTENTICACAO
    assert PrinterType(3) is PrinterType.ECF_PRESENTER_AUTENTICACAO
    assert PrinterType(8) is PrinterType.PASSAGEM_PRESENTER_CUTTER


@pytest.mark.parametrize("code", [0, 9])
def test_printer_type_unknown_code(code):
    with pytest.raises(ValueError):
        PrinterType(code)


def test_extended_status_first_bit():
    status = ExtendedStatus.from_byte(0x01)
    assert status.compr_nao_fiscal_aberto is True
    assert status.active() == ["compr_nao_fiscal_aberto"]


def test_extended_status_unused_bits_ignored():
    status = ExtendedStatus.from_byte(0x90)
    assert status == ExtendedStatus()
    assert status.active() == []


def test_fiscal_flags_coupon_open_and_memory_full():
    flags = FiscalFlags.from_byte(0x81)
    assert flags.cupom_fiscal_aberto is True
    assert flags.memoria_fiscal_lotada is True
    assert flags.reducao_z is False


def test_fiscal_flags_cancel_allowed():
    flags = FiscalFlags.from_byte(0x20)
    assert flags.active() == ["pode_canc_cupom_fiscal"]


def test_fiscal_flags3_printer_online():
    flags = FiscalFlags3.from_byte(0x20)
    assert flags.impressora_online is True
    assert flags.pouco_papel is False


def test_fiscal_flags3_low_paper():
    flags = FiscalFlags3.from_byte(0x01)
    assert flags.active() == ["pouco_papel"]


@pytest.mark.parametrize("byte", range(256))
def test_decode_encode_decode_is_stable(byte):
    status = ExtendedStatus.from_byte(byte)
    assert ExtendedStatus.from_byte(status.to_byte()) == status
    assert status.to_byte() & ~byte == 0

    flags = FiscalFlags.from_byte(byte)
    assert FiscalFlags.from_byte(flags.to_byte()) == flags
    assert flags.to_byte() & ~byte == 0

    flags3 = FiscalFlags3.from_byte(byte)
    assert FiscalFlags3.from_byte(flags3.to_byte()) == flags3
    assert flags3.to_byte() & ~byte == 0


def test_zero_byte_has_no_flags():
    assert ExtendedStatus.from_byte(0) == ExtendedStatus()
    assert FiscalFlags.from_byte(0) == FiscalFlags()
    assert FiscalFlags3.from_byte(0) == FiscalFlags3()
    assert ExtendedStatus.from_byte(0).to_byte() == 0
    assert FiscalFlags.from_byte(0).to_byte() == 0
    assert FiscalFlags3.from_byte(0).to_byte() == 0


def test_all_flags_round_trip():
    status = ExtendedStatus.from_byte(0xFF)
    assert status.to_byte() == 0x6F
    assert len(status.active()) == 6

    flags = FiscalFlags.from_byte(0xFF)
    assert flags.to_byte() == 0xAF
    assert len(flags.active()) == 6

    flags3 = FiscalFlags3.from_byte(0xFF)
    assert flags3.to_byte() == 0x3F
    assert len(flags3.active()) == 6


@pytest.mark.parametrize("byte", [-1, 256])
def test_out_of_range_byte(byte):
    with pytest.raises(ValueError):
        ExtendedStatus.from_byte(byte)
    with pytest.raises(ValueError):
        FiscalFlags.from_byte(byte)
    with pytest.raises(ValueError):
        FiscalFlags3.from_byte(byte)


def test_non_integer_byte():
    with pytest.raises(TypeError):
        ExtendedStatus.from_byte("1")
    with pytest.raises(TypeError):
        FiscalFlags.from_byte("1")
    with pytest.raises(TypeError):
        FiscalFlags3.from_byte(True)