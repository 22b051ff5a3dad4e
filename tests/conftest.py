"""Shared pytest fixtures for nginxunescape tests."""

import pytest

# ngx_http_log_escape table as shipped by nginx, \ included
_NGINX_ESCAPE_WORDS = (
    0xffffffff,
    0x00000004,
    0x10000000,
    0x80000000,
    0xffffffff,
    0xffffffff,
    0xffffffff,
    0xffffffff,
)


def _nginx_escape(raw: bytes) -> bytes:
    out = bytearray()
    for b in raw:
        if _NGINX_ESCAPE_WORDS[b >> 5] & (1 << (b & 0x1f)):
            out += b"\\x%02X" % b
        else:
            out.append(b)
    return bytes(out)


@pytest.fixture
def nginx_escape():
    """Reference encoder doing what nginx does to a variable before logging it."""
    return _nginx_escape


@pytest.fixture
def raw_fields() -> list[bytes]:
    return [
        b"",
        b"safe string",
        b'GET /index.html?q="quoted" HTTP/1.1',
        b"C:\\Windows\\System32",
        b"tab\there\r\nnew line",
        "Ünïcödé ✓ ユーザー".encode("utf-8"),
        b"\x00\x01\x1f\x7f\x80\xff",
        b"\\x41 is not an escape in raw data",
        bytes(range(256)),
    ]
