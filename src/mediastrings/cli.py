"""CLI entry point for mediastrings."""

import click
from loguru import logger

from .charset import SystemLocale
from .compare import str_hash
from .config import MediaStringsConfig
from .filename import normalize_filename
from .natsort import compare_natural, compare_natural_encoded, natural_sorted
from .numeric import format_time
from .percent import decode_percent, encode_percent
from .text import as_text
from .uri import (
    construct_uri,
    filename_to_uri,
    get_extension,
    get_scheme,
    uri_to_display,
    uri_to_filename,
)

log = logger.bind(stage="cli")


def _bridge(config: MediaStringsConfig) -> SystemLocale:
    return SystemLocale(config.charset or None)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to .env file.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_file: str | None) -> None:
    """Convert between filenames, file:// URIs, and display strings."""
    config_kwargs: dict = {}
    if config_file:
        config_kwargs["_env_file"] = config_file
    if verbose:
        config_kwargs["log_level"] = "DEBUG"

    config = MediaStringsConfig(**config_kwargs)
    config.setup_logging()
    log.debug(f"Config: {config.model_dump()}")
    ctx.obj = config


@main.command("to-uri")
@click.argument("path")
@click.pass_obj
def to_uri(config: MediaStringsConfig, path: str) -> None:
    """Print the file:// URI for a local PATH."""
    click.echo(filename_to_uri(path, bridge=_bridge(config)))


@main.command("to-filename")
@click.argument("uri")
@click.option("--no-locale", is_flag=True, help="Keep UTF-8, skip locale conversion.")
@click.pass_obj
def to_filename(config: MediaStringsConfig, uri: str, no_locale: bool) -> None:
    """Print the local filename for a file:// URI."""
    name = uri_to_filename(uri, use_locale=not no_locale, bridge=_bridge(config))
    if name is None:
        raise click.UsageError(f"Not a file URI: {uri}")
    click.echo(name)


@main.command()
@click.argument("uri")
@click.pass_obj
def display(config: MediaStringsConfig, uri: str) -> None:
    """Print URI in human-readable form."""
    click.echo(uri_to_display(uri, config=config, bridge=_bridge(config)))


@main.command()
@click.argument("path")
@click.argument("reference")
@click.pass_obj
def construct(config: MediaStringsConfig, path: str, reference: str) -> None:
    """Resolve playlist entry PATH against the playlist URI REFERENCE."""
    uri = construct_uri(path, reference, config=config, bridge=_bridge(config))
    if uri is None:
        raise click.UsageError(f"Cannot resolve {path} against {reference}")
    click.echo(uri)


@main.command()
@click.argument("path")
def normalize(path: str) -> None:
    """Collapse "." and ".." elements of PATH."""
    click.echo(normalize_filename(path))


@main.command()
@click.argument("text")
def encode(text: str) -> None:
    """Percent-encode TEXT."""
    click.echo(encode_percent(text))


@main.command()
@click.argument("text")
def decode(text: str) -> None:
    """Percent-decode TEXT."""
    click.echo(as_text(decode_percent(text)))


@main.command("hash")
@click.argument("text")
def hash_(text: str) -> None:
    """Print the 32-bit index hash of TEXT."""
    click.echo(str_hash(text))


@main.command()
@click.argument("a")
@click.argument("b")
@click.option("--encoded", is_flag=True, help="Decode %XX escapes while comparing.")
def compare(a: str, b: str, encoded: bool) -> None:
    """Print -1, 0, or 1 ordering A against B naturally."""
    click.echo(compare_natural_encoded(a, b) if encoded else compare_natural(a, b))


@main.command("sort")
@click.argument("items", nargs=-1)
@click.option("--encoded", is_flag=True, help="Decode %XX escapes while comparing.")
def sort_(items: tuple[str, ...], encoded: bool) -> None:
    """Print ITEMS in natural order, one per line."""
    for item in natural_sorted(items, encoded=encoded):
        click.echo(item)


@main.command("format-time")
@click.argument("milliseconds", type=int)
@click.pass_obj
def format_time_(config: MediaStringsConfig, milliseconds: int) -> None:
    """Print a duration given in MILLISECONDS."""
    click.echo(format_time(milliseconds, config=config))


@main.command()
@click.argument("uri")
def scheme(uri: str) -> None:
    """Print the scheme of URI (empty for plain paths)."""
    click.echo(get_scheme(uri))


@main.command()
@click.argument("uri")
def extension(uri: str) -> None:
    """Print the file extension of URI."""
    click.echo(get_extension(uri))
