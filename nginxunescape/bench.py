import time
from typing import Callable

from nginxunescape.models import BenchResult

LONG_LINE_CLEAN = b"Mozilla/5.0 (Windows NT 6.1; WOW64; Trident/7.0; rv:11.0) like Gecko"
LONG_LINE_ESCAPED = rb"Mozilla/5.0 (Windows NT 6.1; WOW64; Trident/7.0; rv:11.0) like\x5CGecko"
LONG_LINE_UNESCAPED = rb"Mozilla/5.0 (Windows NT 6.1; WOW64; Trident/7.0; rv:11.0) like\Gecko"


def run(func: Callable[[bytes], bytes], data: bytes, iterations: int, name: str = None) -> BenchResult:
    """Call ``func(data)`` ``iterations`` times and report the mean cost per call."""
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    start = time.perf_counter()
    for _ in range(iterations):
        out = func(data)
        if not out:
            raise RuntimeError(f"{name or func.__name__}: zero length output")
    total = time.perf_counter() - start
    return BenchResult(name or func.__name__, iterations, total, total * 1e9 / iterations)
