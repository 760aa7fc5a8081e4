import io

from ecfspooler.messages import ResponsePacket
from ecfspooler.params import PacketParam
from ecfspooler.tags import PacketType, TextTags, begin_tag, end_tag, type_tag
from ecfspooler.writer import TextWriter, signature

TAGS = TextTags(
    session_id="sessao=",
    command_id="comando=",
    param_separator="=",
    message_begin="<msg>",
    message_end="</msg>",
    server_id="servidor=",
)


def _write(pkt):
    out = io.StringIO()
    TextWriter(out, TAGS).write_packet(pkt)
    return out.getvalue().split("\n")


def test_signature():
    assert signature() == "spooler - Gateway para ECFs (4.1-0b)"


def test_begin_session_ok():
    pkt = ResponsePacket("sgi_id_x")
    pkt.type = PacketType.BEGIN_SESSION
    lines = _write(pkt)
    assert lines == [
        begin_tag(),
        type_tag(PacketType.BEGIN_SESSION) + "_response",
        TAGS.server_id + signature(),
        TAGS.session_id + "sgi_id_x",
        "0",
        end_tag(),
        "",
    ]


def test_begin_session_refused_omits_session():
    pkt = ResponsePacket(ret_code=-1)
    pkt.type = PacketType.BEGIN_SESSION
    pkt.add("msg", "ECF ja esta em uso")
    lines = _write(pkt)
    assert not any(line.startswith(TAGS.session_id) for line in lines)
    assert lines[3:6] == ["-1", "ECF ja esta em uso", end_tag()]


def test_execute_has_no_signature_and_writes_all_values():
    pkt = ResponsePacket("s1", "cmd")
    pkt.type = PacketType.EXECUTE
    pkt.add("a", "one")
    pkt.add_param(PacketParam("b", "two", "three", "four"))
    lines = _write(pkt)
    assert TAGS.server_id + signature() not in lines
    assert lines[1] == type_tag(PacketType.EXECUTE) + "_response"
    assert lines[2:] == [
        TAGS.session_id + "s1",
        "0",
        "one",
        "two",
        "three",
        "four",
        end_tag(),
        "",
    ]


def test_status_includes_signature_and_session():
    pkt = ResponsePacket("s2", ret_code=500)
    pkt.type = PacketType.STATUS
    lines = _write(pkt)
    assert lines[2] == TAGS.server_id + signature()
    assert lines[3] == TAGS.session_id + "s2"
    assert lines[4] == "500"


def test_param_without_values_writes_nothing():
    pkt = ResponsePacket("s")
    pkt.type = PacketType.RESET
    pkt.add_param(PacketParam("empty"))
    lines = _write(pkt)
    assert lines[-3:] == ["0", end_tag(), ""]


def test_untyped_packet_writes_bare_context():
    pkt = ResponsePacket("s", ret_code=1)
    lines = _write(pkt)
    assert lines[0] == begin_tag()
    assert lines[1] == "_response"
    assert lines[-2] == end_tag()