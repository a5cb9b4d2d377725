"""CLI command: tailforge inspect -- show what a build would scan and keep."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from tailforge.build import Builder
from tailforge.config import load_config
from tailforge.errors import TailforgeError


@click.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Directory content patterns are relative to",
)
def inspect(config_path: str, root: str) -> None:
    """Run a build and display matched files, candidates and retained classes."""
    try:
        config = load_config(Path(config_path))
        builder = Builder(config, root)
        result = builder.build()
    except TailforgeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    prepared = builder.prepare()
    click.echo(f"Dark mode:  {prepared.theme.dark_mode}")
    click.echo(f"Universe:   {len(prepared.universe)} utilities")
    click.echo(f"Candidates: {len(result.candidates)}")
    click.echo(f"Retained:   {len(result.class_names)} classes")
    click.echo()

    click.echo("Files:")
    for path in builder.store.paths:
        try:
            shown = path.relative_to(builder.root)
        except ValueError:
            shown = path
        click.echo(f"  {shown}  candidates={len(builder.store.tokens_for(path))}")
    click.echo()

    click.echo("Classes:")
    for name in result.class_names:
        click.echo(f"  {name}")

    if result.warnings:
        click.echo()
        click.echo("Warnings:")
        for diag in result.warnings:
            click.echo(f"  {diag}")
            if diag.fix:
                click.echo(f"    fix: {diag.fix}")
