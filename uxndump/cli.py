import enum
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from .dump import UnreadableRom, load_rom, write_listing


class ExitCode(enum.IntEnum):
    OK = 0
    UNREADABLE = 1
    # reported by click itself when ROM is missing
    USAGE = 2
    UNWRITABLE = 3


app = typer.Typer(add_completion=False)


@app.command()
def main(
    rom: Path = typer.Argument(..., help="the rom to disassemble"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="write the listing to OUTPUT instead of stdout"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="log debug output"),
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        code = load_rom(rom)
    except UnreadableRom as e:
        typer.echo(f"file open error: {e}", err=True)
        raise typer.Exit(code=ExitCode.UNREADABLE)

    if output is None:
        write_listing(code, sys.stdout)
        return

    try:
        f = open(output, "w")
    except OSError as e:
        typer.echo(f"cannot write {output}: {e.strerror or e}", err=True)
        raise typer.Exit(code=ExitCode.UNWRITABLE)
    with f:
        write_listing(code, f)
