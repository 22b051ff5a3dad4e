"""
Revert nginx escaping applied to variables before they are written to log.

Split the log line into fields first and unescape each field separately.
Quote (", 0x22) is a safe field delimiter for a custom nginx log format:
nginx always writes it as \\x22.
"""
from __future__ import annotations

from nginxunescape.tables import ESCAPE, HEX

__all__ = ["nginx", "nginx_unsafe", "UnescapeError", "ShortScanError", "NotEscapedError"]


class UnescapeError(ValueError):
    """Base for decoding failures.

    ``output`` holds the bytes decoded before the failure, ``position`` is
    the offset of the offending input byte.
    """
    message = "unescape: error"

    def __init__(self, output: bytes, position: int):
        super().__init__(output, position)
        self.output = output
        self.position = position

    def __str__(self):
        return f"{self.message} at offset {self.position}"


class ShortScanError(UnescapeError):
    """Input has an invalid escape sequence."""
    message = "unescape: malformed escape sequence"


class NotEscapedError(UnescapeError):
    """Input has bytes nginx would have escaped (binary garbage in file, etc)."""
    message = "unescape: input not properly escaped"


def nginx(data: bytes) -> bytes:
    """Unescape nginx log field value.

    Assumes input is read from a valid log file and does not contain any bytes
    not allowed by ngx_http_log_module.

    >>> nginx(rb'foo\\x22.bar\\x5C?baz')
    b'foo".bar\\\\?baz'
    """
    return _nginx(data, False)


def nginx_unsafe(data: bytes) -> bytes:
    """Unescape nginx log field value using strict mode.

    Assumes input is read from an untrusted log file and checks every input
    byte with the same table ngx_http_log_module uses.
    """
    return _nginx(data, True)


def _nginx(data: bytes, validate: bool) -> bytes:
    if not isinstance(data, bytes):
        data = bytes(memoryview(data))
    if not data:
        return b""
    if not validate and b"\\" not in data:
        return data

    out = bytearray()
    unescape = False  # unescape mode flag
    c = 0  # intermediate char
    seen = 0  # chars seen in unescape mode, 1st is `x`
    for i, b in enumerate(data):
        if validate and ESCAPE[b]:
            raise NotEscapedError(bytes(out), i)
        if not unescape and b == 0x5C:
            unescape = True
            seen = 0
            c = 0
            continue
        if unescape and seen == 0:
            if b == 0x78:
                seen += 1
                continue
            raise ShortScanError(bytes(out), i)
        if unescape:
            n = HEX.find(b)
            if n < 0:
                raise ShortScanError(bytes(out), i)
            if seen == 1:
                c = n << 4
                seen += 1
                continue
            out.append(c | n)
            unescape = False
            continue
        out.append(b)
    # an escape cut off by the end of the field is dropped
    return bytes(out)
