"""CLI command: tailforge build -- generate the stylesheet."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

import click

from tailforge.build import Builder, BuildResult, PollingObserver, Watcher, write_stylesheet
from tailforge.config import load_config
from tailforge.errors import TailforgeError
from tailforge.events import types as events
from tailforge.events.bus import EventBus


def _trace(event: object) -> None:
    click.echo(f"event: {event}", err=True)


def _emitter(output: str | None, event_bus: EventBus):
    def on_emit(result: BuildResult) -> None:
        if output is None:
            click.echo(result.css, nl=False)
            return
        if write_stylesheet(output, result.css):
            event_bus.emit(
                events.StylesheetEmitted(
                    sequence=result.sequence, path=output, size=len(result.css)
                )
            )
        click.echo(
            f"Build {result.sequence}: {len(result.retained)} rule(s) -> {output}",
            err=True,
        )

    return on_emit


@click.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", default=None, help="Stylesheet path (stdout if omitted)")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Directory content patterns are relative to",
)
@click.option("--watch", is_flag=True, help="Rebuild when content files change")
@click.option("--debounce", type=float, default=0.1, help="Seconds of quiet before a rebuild")
@click.option("--poll-interval", type=float, default=0.5, help="Seconds between file polls")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging plus a trace of build events")
def build(
    config_path: str,
    output: str | None,
    root: str,
    watch: bool,
    debounce: float,
    poll_interval: float,
    verbose: bool,
) -> None:
    """Build the stylesheet for CONFIG_PATH.

    Exits 1 on a fatal configuration, theme or content-pattern error.
    """
    event_bus = EventBus()
    if verbose:
        logging.getLogger("tailforge").setLevel(logging.DEBUG)
        event_bus.on_all(_trace)
    on_emit = _emitter(output, event_bus)

    try:
        config = load_config(Path(config_path))
        builder = Builder(config, root, event_bus=event_bus)
        result = builder.build()
    except TailforgeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    on_emit(result)
    if not watch:
        return

    watcher = Watcher(builder, on_emit, debounce=debounce)
    observer = PollingObserver(root, config.content_patterns, watcher.notify, interval=poll_interval)
    watcher.start()
    observer.start()
    click.echo(f"Watching {len(config.content_patterns)} pattern(s) under {root}", err=True)
    try:
        while True:
            time.sleep(1.0)
    except KeyboardInterrupt:
        click.echo("Stopping", err=True)
    finally:
        observer.stop()
        watcher.stop()
