"""CLI command: tailforge validate -- load the config and resolve its theme."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from tailforge.config import load_config
from tailforge.errors import ConfigError, InvalidTokenError
from tailforge.model.diagnostic import Diagnostic, Severity
from tailforge.plugins import load_plugins
from tailforge.purge import Safelist
from tailforge.theme import resolve_config_theme


@click.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
def validate(config_path: str) -> None:
    """Validate a configuration file.

    Resolves the theme, loads plugins and compiles the safelist.  Prints a
    diagnostic and exits with code 1 on the first error.
    """
    path = Path(config_path)
    try:
        config = load_config(path)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    try:
        theme = resolve_config_theme(config.theme, dark_mode=config.dark_mode)
        load_plugins(config.plugins)
        Safelist.from_config(config.safelist)
    except InvalidTokenError as exc:
        diag = Diagnostic(
            rule="invalid_token",
            severity=Severity.ERROR,
            message=str(exc),
            path=str(path),
            token=f"{exc.category}.{exc.token}",
        )
        click.echo(str(diag), err=True)
        sys.exit(1)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    counts = ", ".join(f"{name}={len(theme.tokens(name))}" for name in theme)
    click.echo(f"OK: {path.name} is valid ({counts})")
