from __future__ import annotations

import logging
from pathlib import Path

from colorama import Fore, Style, just_fix_windows_console
import typer

from lrcparse.config import FORMATS, AppConfig, load_config
from lrcparse.logging_setup import setup_logging
from lrcparse.lrc.errors import LrcParseError
from lrcparse.lrc.export import export_json, format_item
from lrcparse.lrc.model import Item
from lrcparse.lrc.parse import parse_document

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, add_completion=False)


def _fail(cfg: AppConfig, err: LrcParseError) -> typer.Exit:
    msg = f"Error: {err}"
    if cfg.use_color:
        msg = f"{Fore.RED}{msg}{Style.RESET_ALL}"
    typer.echo(msg, err=True)
    return typer.Exit(code=1)


def _load(cfg: AppConfig, lrc_path: Path) -> list[Item]:
    text = lrc_path.read_text(encoding=cfg.encoding)
    lines = text.splitlines()
    logger.debug("Read %d lines from %s", len(lines), lrc_path)
    try:
        return parse_document(lines)
    except LrcParseError as e:
        raise _fail(cfg, e) from e


@app.command()
def parse(
    lrc_path: Path,
    fmt: str | None = typer.Option(None, "--format", case_sensitive=False, help="text|json"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Parse LRC and print its items."""
    cfg = load_config()
    setup_logging(debug)
    fmt_l = (fmt or cfg.output_format).lower()
    if fmt_l not in FORMATS:
        raise typer.BadParameter("format must be one of: text, json")

    items = _load(cfg, lrc_path)
    if fmt_l == "json":
        typer.echo(export_json(items))
    else:
        for item in items:
            typer.echo(format_item(item))


@app.command()
def check(
    lrc_path: Path,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Validate LRC, report the first error."""
    cfg = load_config()
    setup_logging(debug)
    items = _load(cfg, lrc_path)
    msg = f"OK: {len(items)} items"
    if cfg.use_color:
        msg = f"{Fore.GREEN}{msg}{Style.RESET_ALL}"
    typer.echo(msg)


def main() -> None:
    just_fix_windows_console()
    app()


if __name__ == "__main__":
    main()
