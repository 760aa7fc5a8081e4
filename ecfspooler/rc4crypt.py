"""RC4 encryption of short strings under an MD5-derived key."""

from __future__ import annotations

import argparse
import hashlib
import sys

__all__ = [
    "MAX_DATA",
    "rc4",
    "derive_key",
    "hex_to_bytes",
    "encrypt",
    "decrypt",
    "main",
]

MAX_DATA = 2048

_PROG = "rc4crypt"


def rc4(key: bytes, data: bytes) -> bytes:
    """Apply the RC4 keystream generated from ``key`` to ``data``."""
    if not key:
        raise ValueError("RC4 key must not be empty")
    state = list(range(256))
    j = 0
    for i in range(256):
        j = (j + state[i] + key[i % len(key)]) & 0xFF
        state[i], state[j] = state[j], state[i]
    out = bytearray()
    i = j = 0
    for byte in data:
        i = (i + 1) & 0xFF
        j = (j + state[i]) & 0xFF
        state[i], state[j] = state[j], state[i]
        out.append(byte ^ state[(state[i] + state[j]) & 0xFF])
    return bytes(out)


def derive_key(password: str) -> bytes:
    """Return the 16-byte MD5 digest of ``password`` used as the RC4 key."""
    return hashlib.md5(password.encode("utf-8")).digest()


def _nibble(char: str) -> int:
    try:
        return int(char, 16)
    except ValueError:
        return 0


def hex_to_bytes(text: str) -> bytes:
    """Decode hexadecimal pairs; a non-hex digit counts as 0, an odd last digit is dropped."""
    pairs = zip(text[0::2], text[1::2])
    return bytes((_nibble(hi) << 4) | _nibble(lo) for hi, lo in pairs)


def _check_length(data: str) -> None:
    if len(data) > MAX_DATA:
        raise ValueError(f"O tamanho maximo do bloco de dados e {MAX_DATA} bytes!")


def encrypt(password: str, text: str) -> str:
    """Encrypt ``text`` and return the cipher as upper-case hexadecimal."""
    _check_length(text)
    return rc4(derive_key(password), text.encode("utf-8")).hex().upper()


def decrypt(password: str, hexdata: str) -> str:
    """Decrypt hexadecimal cipher text; the result ends at the first NUL byte."""
    _check_length(hexdata)
    plain = rc4(derive_key(password), hex_to_bytes(hexdata))
    return plain.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``rc4crypt <senha> <operacao> <dados>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print(
            f"\n{_PROG}:\nArgumentos insuficientes!\nSintaxe:\n"
            f"\t{_PROG} <senha> <operacao> <dados>",
            file=sys.stderr,
        )
        return 1

    parser = argparse.Namespace(password=args[0], operation=args[1], data=args[2])
    operation = parser.operation[:1].upper()
    if operation not in ("C", "D"):
        print(
            f"\n{_PROG}:\n Operacao invalida!\nValores aceitos:\n"
            "<C>riptografa\n<D>ecritografa",
            file=sys.stderr,
        )
        return 1

    try:
        if operation == "C":
            result = encrypt(parser.password, parser.data)
        else:
            result = decrypt(parser.password, parser.data)
    except ValueError as err:
        print(f"\n{_PROG}:\n{err}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())