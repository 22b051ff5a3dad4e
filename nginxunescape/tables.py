# vars below taken from ngx_http_log_escape function in
# http/modules/ngx_http_log_module.c

# nginx uses this alphabet to escape chars, uppercase only
HEX = b"0123456789ABCDEF"

# nginx table of bytes that must be escaped, one bit per byte, 32 bytes per word.
# Differs from nginx by allowing \ in input.
_ESCAPE_WORDS = (
    0xffffffff,  # 1111 1111 1111 1111  1111 1111 1111 1111

    # ?>=< ;:98 7654 3210  /.-, +*)( '&%$ #"!
    # 0000 0000 0000 0000  0000 0000 0000 0100
    0x00000004,

    # _^]\ [ZYX WVUT SRQP  ONML KJIH GFED CBA@
    # 0000 0000 0000 0000  0000 0000 0000 0000
    # nginx has 0x10000000 here, the \ bit is cleared
    0x00000000,

    #  ~}| {zyx wvut srqp  onml kjih gfed cba`
    # 1000 0000 0000 0000  0000 0000 0000 0000
    0x80000000,

    0xffffffff,  # 1111 1111 1111 1111  1111 1111 1111 1111
    0xffffffff,  # 1111 1111 1111 1111  1111 1111 1111 1111
    0xffffffff,  # 1111 1111 1111 1111  1111 1111 1111 1111
    0xffffffff,  # 1111 1111 1111 1111  1111 1111 1111 1111
)

ESCAPE: tuple[bool, ...] = tuple(
    bool(_ESCAPE_WORDS[b >> 5] & (1 << (b & 0x1f))) for b in range(256)
)
