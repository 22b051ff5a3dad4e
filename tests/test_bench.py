import pytest

from nginxunescape import bench, nginx, nginx_unsafe


def test_long_line_workloads():
    assert nginx(bench.LONG_LINE_CLEAN) == bench.LONG_LINE_CLEAN
    assert nginx(bench.LONG_LINE_ESCAPED) == bench.LONG_LINE_UNESCAPED
    assert nginx_unsafe(bench.LONG_LINE_ESCAPED) == bench.LONG_LINE_UNESCAPED


def test_run_reports_per_call_cost():
    res = bench.run(nginx, bench.LONG_LINE_ESCAPED, 10)
    assert res.name == "nginx"
    assert res.iterations == 10
    assert res.total_s >= 0
    assert res.ns_per_op == pytest.approx(res.total_s * 1e9 / 10)


def test_run_custom_name():
    assert bench.run(nginx, bench.LONG_LINE_CLEAN, 1, name="clean").name == "clean"


def test_run_rejects_non_positive_iterations():
    with pytest.raises(ValueError):
        bench.run(nginx, bench.LONG_LINE_CLEAN, 0)


def test_run_rejects_empty_output():
    with pytest.raises(RuntimeError):
        bench.run(nginx, b"", 1)
