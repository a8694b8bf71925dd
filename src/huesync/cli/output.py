"""Shared helpers for CLI commands: config loading, error reporting, color output."""

import logging
from pathlib import Path

import click

from huesync.exceptions import HueSyncError, format_error_for_display
from huesync.models import ColorSnapshot, EngineConfig

logger = logging.getLogger(__name__)


def config_path(ctx: click.Context) -> Path:
    """Config file path chosen on the root command."""
    return ctx.find_root().obj["config_path"]


def load_config(ctx: click.Context) -> EngineConfig:
    """Load the config for this invocation, exiting with status 1 if it is broken."""
    path = config_path(ctx)
    try:
        return EngineConfig.load_or_default(path)
    except HueSyncError as e:
        fail(ctx, e)


def fail(ctx: click.Context, error: Exception) -> None:
    """Print a friendly error (no traceback) and exit with status 1."""
    logger.error(f"Command failed: {error}", exc_info=not isinstance(error, HueSyncError))

    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(recovery_hint, err=True)
    ctx.exit(1)


def echo_snapshot(snapshot: ColorSnapshot, as_json: bool = False) -> None:
    """Print all three views of a color."""
    if as_json:
        click.echo(snapshot.model_dump_json(indent=2))
        return

    click.echo(f"HEX  {snapshot.hex}")
    click.echo(f"RGB  {snapshot.css_rgb()}")
    click.echo(f"HSL  {snapshot.css_hsl()}")

