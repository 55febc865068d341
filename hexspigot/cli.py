import click

from .bbp import pi_hex_digits
from .constants import DEFAULT_LIMITS, needs_confirmation, precision_regime
from .formats import FORMATS, serialize_digits
from .log import configure_logging
from .streaming import iter_hex_chunks
from .verify import verify_hex_digits


def _check_positive(name: str, value: int):
    if value < 1:
        raise click.BadParameter("must be >= 1", param_hint=name)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Log progress at debug level.")
def main(verbose: bool):
    configure_logging(verbose)


@main.command()
@click.option("--position", default=0, show_default=True, type=int, help="0-based hex position after the point.")
@click.option("--count", default=64, show_default=True, type=int)
@click.option("--workers", default=1, show_default=True, type=int)
@click.option("--chunk-size", default=16, show_default=True, type=int)
@click.option("--format", "fmt", type=click.Choice(FORMATS, case_sensitive=False), default="txt", show_default=True)
@click.option("--out", "out_path", default="", show_default=True)
@click.option("-y", "--yes", is_flag=True, help="Do not ask before computing imprecise positions.")
def digits(position: int, count: int, workers: int, chunk_size: int, fmt: str, out_path: str, yes: bool):
    if position < 0:
        raise click.BadParameter("must be a non-negative integer", param_hint="--position")
    _check_positive("--count", count)
    _check_positive("--workers", workers)
    _check_positive("--chunk-size", chunk_size)
    fmt = fmt.lower().strip()
    last = position + count - 1
    if needs_confirmation(position) and not yes:
        click.echo("Warning: Position is extremely large. Results may not be accurate.", err=True)
        click.echo("For best results, positions below 1 billion are recommended.", err=True)
        if not click.confirm("Continue?", default=False, err=True):
            return
    if out_path and fmt == "txt":
        with open(out_path, "w", encoding="ascii") as f:
            for chunk in iter_hex_chunks(position, count, chunk_size, workers=workers):
                f.write(chunk)
            f.write("\n")
        click.echo(out_path)
        return
    s = pi_hex_digits(position, count, workers=workers)
    meta = {
        "position": position,
        "count": count,
        "regime": precision_regime(last, DEFAULT_LIMITS),
    }
    payload, _ = serialize_digits(s, fmt, meta)
    if out_path:
        with open(out_path, "wb") as f:
            f.write(payload)
        click.echo(out_path)
    else:
        click.echo(payload.decode("utf-8"), nl=False)


@main.command()
@click.option("--start", default=0, show_default=True, type=int)
@click.option("--count", default=64, show_default=True, type=int)
@click.option("--workers", default=1, show_default=True, type=int)
def verify(start: int, count: int, workers: int):
    if start < 0:
        raise click.BadParameter("must be a non-negative integer", param_hint="--start")
    _check_positive("--count", count)
    _check_positive("--workers", workers)
    if start + count > DEFAULT_LIMITS.direct_limit:
        raise click.BadParameter(
            f"run must end below position {DEFAULT_LIMITS.direct_limit}; the reference grows with the position",
            param_hint="--start/--count",
        )
    ok, mismatches = verify_hex_digits(start, count, workers=workers)
    if not ok:
        shown = ", ".join(str(p) for p in mismatches[:20])
        raise click.ClickException(f"{len(mismatches)} mismatching position(s): {shown}")
    click.echo("ok")
