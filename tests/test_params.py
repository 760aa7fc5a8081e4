import pytest

from ecfspooler.params import PacketParam, ParamError


def test_empty_param_has_no_value():
    param = PacketParam("msg")
    assert len(param) == 0
    with pytest.raises(ParamError):
        param.value()


def test_default_name_is_empty():
    assert PacketParam().name == ""


def test_constructor_values():
    param = PacketParam("msg", "first", "second")
    assert param.value() == "first"
    assert param.values() == ["first", "second"]
    assert len(param) == 2


def test_set_value_replaces_all():
    param = PacketParam("msg", "a", "b", "c")
    param.set_value("z")
    assert param.values() == ["z"]
    assert param.value() == "z"


def test_add_value_appends_in_order():
    param = PacketParam("mensagem")
    for line in ["one", "two", "three"]:
        param.add_value(line)
    assert list(param) == ["one", "two", "three"]
    assert param.value() == "one"


def test_value_can_be_read_repeatedly():
    param = PacketParam("k", "v1", "v2")
    first = param.value()
    second = param.value()
    assert first == "v1"
    assert second == "v1"
    assert list(param) == ["v1", "v2"]
    assert list(param) == ["v1", "v2"]


def test_copy_is_independent():
    original = PacketParam("msg", "x", "y")
    duplicate = original.copy()
    assert duplicate == original
    duplicate.add_value("w")
    duplicate.name = "other"
    assert original.values() == ["x", "y"]
    assert original.name == "msg"
    assert duplicate != original


def test_values_returns_a_copy():
    param = PacketParam("k", "v")
    got = param.values()
    got.append("extra")
    assert len(param) == 1


def test_copy_of_empty_param():
    duplicate = PacketParam("empty").copy()
    assert duplicate.name == "empty"
    assert len(duplicate) == 0