import dataclasses

import pytest

from ecfspooler.tags import (
    PacketContext,
    PacketType,
    TextTags,
    begin_tag,
    context_tag,
    end_tag,
    eof_tag,
    type_tag,
)


def test_frame_tags():
    assert begin_tag() == "<ecf_sgi_begin>"
    assert end_tag() == "<ecf_sgi_end>"
    assert eof_tag() == "<eof>"


@pytest.mark.parametrize(
    "ctx, expected",
    [
        (PacketContext.REQUEST, "_request"),
        (PacketContext.RESPONSE, "_response"),
        (PacketContext.NONE, ""),
    ],
)
def test_context_tag(ctx, expected):
    assert context_tag(ctx) == expected


@pytest.mark.parametrize(
    "tp, expected",
    [
        (PacketType.BEGIN_SESSION, "ecf_begin_session"),
        (PacketType.EXECUTE, "ecf_execute"),
        (PacketType.END_SESSION, "ecf_end_session"),
        (PacketType.STATUS, "ecf_status"),
        (PacketType.RESET, "ecf_reset"),
        (PacketType.NOT_TYPED, ""),
        (PacketType.DEAD_END, ""),
    ],
)
def test_type_tag(tp, expected):
    assert type_tag(tp) == expected


def test_unknown_values_give_empty_tags():
    assert type_tag(99) == ""
    assert context_tag(42) == ""


def test_type_order_matches_wire_numbering():
    assert type_tag(PacketType(0)) == ""
    assert [type_tag(PacketType(number)) for number in range(1, 6)] == [
        "ecf_begin_session",
        "ecf_execute",
        "ecf_end_session",
        "ecf_status",
        "ecf_reset",
    ]


def test_type_tags_are_distinct_for_real_types():
    real = [t for t in PacketType if t not in (PacketType.NOT_TYPED, PacketType.DEAD_END)]
    tags = {type_tag(t) for t in real}
    assert len(tags) == len(real)
    assert all(tag.startswith("ecf_") for tag in tags)


def test_text_tags_is_frozen_and_comparable():
    first = TextTags("sid:", "cid:", "=", "<<", ">>", "srv:")
    second = TextTags("sid:", "cid:", "=", "<<", ">>", "srv:")
    assert first == second
    assert first.param_separator == "="
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.session_id = "other"