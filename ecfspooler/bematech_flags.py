"""Printer types and flag bytes reported by Bematech fiscal printers."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Any, ClassVar

__all__ = ["PrinterType", "ExtendedStatus", "FiscalFlags", "FiscalFlags3"]


class PrinterType(IntEnum):
    """Printer type code returned by the printer driver."""

    ECF_GAVETA_AUTENTICACAO = 1
    ECF_GAVETA_CUTTER = 2
    ECF_PRESENTER_AUTENTICACAO = 3
    ECF_PRESENTER_CUTTER = 4
    PASSAGEM_GAVETA_AUTENTICACAO = 5
    PASSAGEM_GAVETA_CUTTER = 6
    PASSAGEM_PRESENTER_AUTENTICACAO = 7
    PASSAGEM_PRESENTER_CUTTER = 8


class _BitFlags:
    """Decoding of a flag byte into named booleans; bit 0 is the first field."""

    # Bit number of each named field; bits not listed are unused.
    _BITS: ClassVar[dict[str, int]] = {}

    @classmethod
    def _decode(cls, byte: int) -> dict[str, Any]:
        if isinstance(byte, bool) or not isinstance(byte, int):
            raise TypeError(f"flag byte must be an int, not {type(byte).__name__}")
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"flag byte out of range: {byte}")
        return {name: bool(byte & (1 << bit)) for name, bit in cls._BITS.items()}

    def to_byte(self) -> int:
        """Encode the flags back into a byte, unused bits cleared."""
        byte = 0
        for name, bit in self._BITS.items():
            if getattr(self, name):
                byte |= 1 << bit
        return byte

    def active(self) -> list[str]:
        """Return the names of the flags that are set, in bit order."""
        return [f.name for f in fields(self) if getattr(self, f.name)]  # type: ignore[arg-type]


@dataclass(frozen=True)
class ExtendedStatus(_BitFlags):
    """Extended status byte of MFD printers."""

    _BITS: ClassVar[dict[str, int]] = {
        "compr_nao_fiscal_aberto": 0,
        "cdc_aberto": 1,
        "rel_gerencial_aberto": 2,
        "totalizando_cupom": 3,
        "permite_cancelamento_cnf": 5,
        "estorno_cdc_permitido": 6,
    }

    compr_nao_fiscal_aberto: bool = False
    cdc_aberto: bool = False
    rel_gerencial_aberto: bool = False
    totalizando_cupom: bool = False
    permite_cancelamento_cnf: bool = False
    estorno_cdc_permitido: bool = False

    @classmethod
    def from_byte(cls, byte: int) -> ExtendedStatus:
        """Decode ``byte``; bits without a name are ignored."""
        return cls(**cls._decode(byte))


@dataclass(frozen=True)
class FiscalFlags(_BitFlags):
    """Fiscal flags byte."""

    _BITS: ClassVar[dict[str, int]] = {
        "cupom_fiscal_aberto": 0,
        "fecha_pgto_iniciado": 1,
        "horario_verao": 2,
        "reducao_z": 3,
        "pode_canc_cupom_fiscal": 5,
        "memoria_fiscal_lotada": 7,
    }

    cupom_fiscal_aberto: bool = False
    fecha_pgto_iniciado: bool = False
    horario_verao: bool = False
    reducao_z: bool = False
    pode_canc_cupom_fiscal: bool = False
    memoria_fiscal_lotada: bool = False

    @classmethod
    def from_byte(cls, byte: int) -> FiscalFlags:
        """Decode ``byte``; bits without a name are ignored."""
        return cls(**cls._decode(byte))


@dataclass(frozen=True)
class FiscalFlags3(_BitFlags):
    """Third fiscal flags byte of MFD printers."""

    _BITS: ClassVar[dict[str, int]] = {
        "pouco_papel": 0,
        "sensor_papel_habilitado": 1,
        "cancelamento_automatico": 2,
        "desconto_issqn_habilitado": 3,
        "reducaoz_auto_habilitada": 4,
        "impressora_online": 5,
    }

    pouco_papel: bool = False
    sensor_papel_habilitado: bool = False
    cancelamento_automatico: bool = False
    desconto_issqn_habilitado: bool = False
    reducaoz_auto_habilitada: bool = False
    impressora_online: bool = False

    @classmethod
    def from_byte(cls, byte: int) -> FiscalFlags3:
        """Decode ``byte``; bits without a name are ignored."""
        return cls(**cls._decode(byte))