import dataclasses
import sys

import click
import ujson
from rich.console import Console
from rich.table import Table

from nginxunescape import bench, settings
from nginxunescape._logging import get_logger, setup_logging
from nginxunescape.models import ErrorPolicy, FieldResult
from nginxunescape.unescape import UnescapeError, nginx, nginx_unsafe

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group('nginx-unescape')
@click.help_option('--help', '-h', help='Show this message and exit.')
def nginx_unescape_cli():
    ...


def _field(raw: bytes) -> bytes:
    # nginx escapes CR and LF, so raw ones can only be the line terminator
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return raw


def unescape_fields(lines, strict: bool):
    """Decode every line as one field and yield a ``FieldResult`` per line.

    A field that fails to decode is logged and yielded with its partial output and the error message.
    """
    logger = get_logger()
    decode = nginx_unsafe if strict else nginx
    for lineno, raw in enumerate(lines, 1):
        try:
            yield FieldResult(lineno, decode(_field(raw)))
        except UnescapeError as err:
            logger.warning(f"line {lineno}: {err}")
            yield FieldResult(lineno, err.output, str(err))


@nginx_unescape_cli.command(
    name="unescape",
    help="Unescape an nginx log field per line of INPUT_FILE (stdin by default).",
)
@click.argument(
    "input_file",
    type=click.File("rb"),
    default="-",
    metavar="INPUT_FILE",
)
@click.option(
    "-o",
    "--output",
    type=click.File("wb"),
    default="-",
    show_default="stdout",
    help="Where to write the decoded fields, one per line.",
)
@click.option(
    "--strict/--no-strict",
    default=settings.STRICT,
    show_default=True,
    help="Reject fields with raw bytes nginx would have escaped. Use for untrusted logs.",
)
@click.option(
    "--on-error",
    type=ErrorPolicy,
    default=settings.ON_ERROR.value,
    show_default=True,
    help=f"What to do with a field that fails to decode. Can be: {[p.value for p in ErrorPolicy]}",
)
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Outputs the result in a single JSON string. Suitable for scripts.",
)
@click.option('-n', '--no-print', is_flag=True, default=False, help="Disable printing of the summary.")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=settings.LOG_LEVEL,
              show_default=True)
def unescape_command(input_file, output, strict: bool, on_error: ErrorPolicy, json_output: bool,
                     no_print: bool, log_level: str):
    setup_logging(log_level.upper())
    console = Console(stderr=True)
    results = []
    count = 0
    errors = 0
    for res in unescape_fields(input_file, strict):
        count += 1
        if res.error is not None:
            errors += 1
            if on_error is ErrorPolicy.fail:
                output.flush()
                console.print(f"[red][bold]line {res.line}: {res.error}[/bold][/red]")
                sys.exit(1)
            if on_error is ErrorPolicy.skip:
                continue
        if json_output:
            results.append(res.to_json())
        else:
            output.write(res.output + b"\n")

    if json_output:
        output.write(ujson.dumps(results, ensure_ascii=False).encode("utf-8") + b"\n")
    output.flush()
    if not no_print:
        console.print(f"Decoded fields: [blue][bold]{count}[/bold][/blue], "
                      f"errors: [red]{errors}[/red], mode: {'strict' if strict else 'permissive'}",
                      style="rgb(127,127,127)")


@nginx_unescape_cli.command(
    name="bench",
    help="Time decoding of a long user agent line.",
)
@click.option(
    "-i",
    "--iterations",
    type=click.IntRange(min=1),
    default=settings.BENCH_ITERATIONS,
    show_default=True,
    help="Number of calls per workload.",
)
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Outputs the result in a single JSON string. Suitable for scripts.",
)
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=settings.LOG_LEVEL,
              show_default=True)
def bench_command(iterations: int, json_output: bool, log_level: str):
    logger = setup_logging(log_level.upper())
    workloads = [
        ("nginx/clean", nginx, bench.LONG_LINE_CLEAN),
        ("nginx/escaped", nginx, bench.LONG_LINE_ESCAPED),
        ("nginx_unsafe/escaped", nginx_unsafe, bench.LONG_LINE_ESCAPED),
    ]
    results = []
    for name, func, data in workloads:
        logger.debug(f"running {name} x{iterations}")
        results.append(bench.run(func, data, iterations, name=name))

    if json_output:
        click.echo(ujson.dumps([dataclasses.asdict(r) for r in results]))
        return
    table = Table(title=f"{iterations} iterations")
    table.add_column("workload", style="cyan")
    table.add_column("total, s", justify="right")
    table.add_column("ns/op", justify="right", style="blue")
    for r in results:
        table.add_row(r.name, f"{r.total_s:.4f}", f"{r.ns_per_op:.1f}")
    Console().print(table)


if __name__ == "__main__":
    nginx_unescape_cli()
