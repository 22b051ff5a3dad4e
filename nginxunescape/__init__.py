"""
nginxunescape - revert nginx access log escaping of variables (\\xHH sequences)
"""
from nginxunescape.unescape import NotEscapedError, ShortScanError, UnescapeError, nginx, nginx_unsafe
from nginxunescape.tables import ESCAPE, HEX


def main():
    """Entry point for the command-line interface"""
    from nginxunescape.cli import nginx_unescape_cli
    nginx_unescape_cli()


if __name__ == '__main__':
    main()
