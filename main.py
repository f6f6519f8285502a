#!/usr/bin/env python3

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from config import Config
from rtttl import nearest_bpm, nearest_duration, nearest_octave, parse
from utils import iterable_from_file


@click.group
@click.option('--config', '-c', 'config_path',
              type=click.Path(file_okay=True, dir_okay=False, exists=True),
              default=None,
              help="JSON file overriding the hardcoded defaults and name limits.")
@click.option('--verbose/--no-verbose', default=False,
              help="Log every diagnostic as it is found.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    ctx.obj = Config.load(config_path) if config_path else Config()


def collect(rtttls: tuple[str, ...], file: Optional[Path]) -> list[str]:
    texts = list(rtttls)
    if file is not None:
        # One ringtone per line, blank lines ignored.
        texts.extend(line.strip() for line in iterable_from_file(file) if line.strip())
    if not texts:
        raise click.UsageError("No RTTTL string given.")
    return texts


@click.command()
@click.argument("rtttls", nargs=-1, type=str)
@click.option("--file", "-f", "file",
              type=click.Path(file_okay=True, dir_okay=False, exists=True),
              default=None,
              help="Read RTTTL strings from a file, one per line.")
@click.option("--strict/--no-strict", default=False,
              help="Fail on warnings as well as on errors.")
@click.pass_obj
def check(config: Config, rtttls: tuple[str, ...], file: Optional[Path], strict: bool):
    """Parses and validates RTTTL strings, dumping the results."""
    failed = False
    for text in collect(rtttls, file):
        result = parse(text, config)
        click.echo(result.dump())
        if result.has_errors or (strict and result.has_warnings):
            failed = True
    if failed:
        sys.exit(1)


@click.command()
@click.argument("rtttls", nargs=-1, type=str)
@click.option("--file", "-f", "file",
              type=click.Path(file_okay=True, dir_okay=False, exists=True),
              default=None,
              help="Read RTTTL strings from a file, one per line.")
@click.pass_obj
def canonical(config: Config, rtttls: tuple[str, ...], file: Optional[Path]):
    """Prints the canonical form of RTTTL strings."""
    for text in collect(rtttls, file):
        result = parse(text, config)
        if (rebuilt := result.canonical(config.max_name_length)) is None:
            raise click.ClickException(result.errors[0])
        click.echo(rebuilt)


NEAREST = {
    "bpm": nearest_bpm,
    "duration": nearest_duration,
    "octave": nearest_octave,
}


@click.command()
@click.argument("kind", type=click.Choice(list(NEAREST.keys())))
@click.argument("value", type=int)
def nearest(kind: str, value: int):
    """Prints the valid RTTTL setting nearest to VALUE."""
    click.echo(NEAREST[kind](value))


cli.add_command(check)
cli.add_command(canonical)
cli.add_command(nearest)


def main():
    logging.basicConfig(level=logging.INFO)
    cli()


if __name__ == '__main__':
    main()
