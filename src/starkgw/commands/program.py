"""
Program - Encode and decode contract programs offline.

``compress`` prints the base64(gzip(json)) form of a compiled contract's
program; ``decompress`` reverses it.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click

from ..codec.compression import (
    CodecError,
    CompressionOptions,
    compress_program_with_stats,
    decompress_program,
)
from ..spec.models import CompiledContract
from ..spec.schemas import SchemaValidationError
from ..utils import format_size, load_json, write_json


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write encoded program here")
@click.option("--level", default=-1, type=click.IntRange(-1, 9), help="gzip level (-1 = zlib default)")
@click.option("--raw", is_flag=True, help="PATH holds a bare program, not a compiled contract")
def compress(path: Path, output: Optional[Path], level: int, raw: bool) -> None:
    """Encode the program of the compiled contract at PATH."""
    try:
        if raw:
            program = load_json(path)
        else:
            program = CompiledContract.from_path(path).program
        result = compress_program_with_stats(program, CompressionOptions(level=level))
    except SchemaValidationError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        for err in exc.errors:
            click.echo(f"  - {err}")
        sys.exit(1)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        click.secho(f"ERROR: {path} is not valid UTF-8 JSON: {exc}", fg="red")
        sys.exit(1)
    except CodecError as exc:
        click.secho(f"ERROR: program {exc.stage} failed: {exc}", fg="red")
        sys.exit(1)

    if output is None:
        click.echo(result.encoded)
        return

    output.write_text(result.encoded, encoding="utf-8")
    click.echo(f"  Original:   {format_size(result.original_size)}")
    click.echo(f"  Compressed: {format_size(result.compressed_size)}")
    click.echo(f"  Saved:      {result.space_saved_percent:.1f}%")
    click.secho(f"Wrote {output}", fg="green")


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path), required=False)
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write decoded JSON here")
def decompress(path: Optional[Path], output: Optional[Path]) -> None:
    """Decode an encoded program from PATH (or stdin)."""
    if path is None:
        encoded = click.get_text_stream("stdin").read()
    else:
        try:
            encoded = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            click.secho(f"ERROR: {path} is not UTF-8 text: {exc}", fg="red")
            sys.exit(1)

    try:
        program = decompress_program(encoded.strip())
    except CodecError as exc:
        click.secho(f"ERROR: program {exc.stage} failed: {exc}", fg="red")
        sys.exit(1)

    if output is None:
        click.echo(json.dumps(program, indent=2, sort_keys=True))
        return

    write_json(output, program)
    click.secho(f"Wrote {output}", fg="green")
