# ecfspooler

Building blocks for a spooler that sits between point-of-sale software and
an ECF (fiscal printer): the text format of request and response packets,
session identifiers, decoding of Bematech status and flag bytes, and a small
RC4 helper for protecting configuration values.

## Modules

- `ecfspooler.tags` – `PacketType`, `PacketContext`, the framing tags
  (`begin_tag()`, `end_tag()`, `eof_tag()`), `context_tag()`, `type_tag()`
  and `TextTags`, the set of line markers the text format uses.
- `ecfspooler.params` – `PacketParam`, a named parameter holding one or more
  text values; `ParamError` when a value is asked of an empty parameter.
- `ecfspooler.packet` – `Packet`, with `type`, `session`, `id` and an ordered
  list of parameters; `PacketError` when `first_param()` finds none.
- `ecfspooler.messages` – `RequestPacket` and `ResponsePacket` (which adds
  `ret_code`, starting at `RESPONSE_OK`), plus `RESPONSE_OK` and
  `RESPONSE_ERR`.
- `ecfspooler.session` – `Session`, generation and matching of session ids.
- `ecfspooler.reader` – `TextReader`, the state machine that parses a
  request packet; `ReaderError` and `CutPaperRequest`.
- `ecfspooler.writer` – `TextWriter`, which serialises response packets, and
  `signature()`, the server signature line.
- `ecfspooler.bematech_status` – `st1_messages()`, `st2_messages()`,
  `st3_message()` and `StatusMFD`.
- `ecfspooler.bematech_flags` – `PrinterType`, `ExtendedStatus`,
  `FiscalFlags` and `FiscalFlags3`.
- `ecfspooler.rc4crypt` – `encrypt()`, `decrypt()`, `rc4()`, `derive_key()`,
  `hex_to_bytes()` and the `rc4-crypt` command.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The text packet format

The markers that prefix session, command and server lines, split parameters
and delimit messages are not fixed by the package; you supply them as a
`TextTags`:

```python
import io

from ecfspooler.tags import PacketType, TextTags
from ecfspooler.reader import TextReader

tags = TextTags(
    session_id="ssid:",
    command_id="cmd:",
    param_separator="=",
    message_begin="<msg>",
    message_end="</msg>",
    server_id="server:",
)

request = io.StringIO(
    "<ecf_sgi_begin>\n"
    "ecf_execute_request\n"
    "ssid:abc\n"
    "cmd:print\n"
    "qty=2\n"
    "<ecf_sgi_end>\n"
)
packet = TextReader(request, tags).read_packet()
assert packet.type == PacketType.EXECUTE
assert packet.session == "abc" and packet.id == "print"
assert packet.first_param().value() == "2"
```

Session-opening (`ecf_begin_session_request`), reset and status requests end
right after the type line; an end-of-session request carries the session line
but no command line. Parameters follow the command line, one per line, split
at the first separator. A line containing `message_begin` opens a multi-line
message, gathered line by line into a parameter named `mensagem` until a line
containing `message_end`.

`read_packet()` stops at the end tag; if the stream ends first, the packet
read so far is returned. A malformed packet raises `ReaderError`. If the
first line is `cortar_papel_ecf` (any case) instead of the begin tag,
`CutPaperRequest` is raised.

A response is written with `TextWriter`:

```python
from ecfspooler.messages import ResponsePacket
from ecfspooler.writer import TextWriter

response = ResponsePacket("abc", "print")
response.type = PacketType.EXECUTE
response.add("msg", "ok")

out = io.StringIO()
TextWriter(out, tags).write_packet(response)
print(out.getvalue())
```

```
<ecf_sgi_begin>
ecf_execute_response
ssid:abc
0
ok
<ecf_sgi_end>
```

Session-opening and status responses also carry a line with `server_id`
followed by `signature()`. A refused session-opening response (a `ret_code`
other than `RESPONSE_OK`) has no session line. Each parameter contributes
one line per value; parameter names are not written.

## Sessions

```python
from ecfspooler.session import Session

session = Session()
ssid = session.generate()      # "sgi_id_" followed by 19 hex digits
assert session.created()
assert session.match(ssid.upper())   # comparison ignores case
assert session == ssid
session.reset()
```

`generate()` keeps an identifier already held and returns it.

## Printer status and flags

```python
from ecfspooler.bematech_status import StatusMFD, st1_messages, st3_message
from ecfspooler.bematech_flags import FiscalFlags

st3_message(0)        # "Comando Ok"
st1_messages(0x80)    # ["Fim de papel"]

status = StatusMFD(st1=0x40, st3=11)
status.acknowledged   # True: ack defaults to ASCII ACK (0x06)
status.messages()     # ["Pouco papel", "Impressora sem papel"]

flags = FiscalFlags.from_byte(0x01)
flags.cupom_fiscal_aberto   # True
flags.active()              # ["cupom_fiscal_aberto"]
flags.to_byte()             # 1
```

ST1 and ST2 messages are listed highest bit first. `st3_message()` returns a
note for codes below 0, above 218, or equal to the undefined code 216. Byte
values outside 0–255 raise `ValueError`.

## Encrypting configuration values

From Python:

```python
from ecfspooler import rc4crypt

password = "password"
hexdata = rc4crypt.encrypt(password, "some value")
assert rc4crypt.decrypt(password, hexdata) == "some value"
```

From the shell, with the operation `C` (encrypt) or `D` (decrypt); only the
first letter of the operation counts, in either case:

```
rc4-crypt password C "some value"
rc4-crypt password D <hex output of the previous command>
```

The key is the MD5 digest of the password; encrypted output is printed as
upper-case hexadecimal. Input longer than 2048 characters is refused.
Decrypted text ends at the first NUL byte.

## What this package does not do

It does not run as a spooler service: there is no work-directory scanning, no
configuration file loading, no dispatching of requests to a printer and no
printer driver. It supplies the packet format, sessions and status decoding
that such a service is built from.