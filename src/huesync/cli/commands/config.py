"""Config command group: inspect and reset the configuration file."""

import click

from huesync.cli.output import config_path, fail, load_config
from huesync.exceptions import HueSyncError
from huesync.models import EngineConfig
from huesync.utils import PydanticPersistence


@click.group(name="config")
def config():
    """Inspect and manage the huesync configuration."""
    pass


@config.command(name="show")
@click.pass_context
def config_show(ctx: click.Context):
    """Print the active configuration as JSON."""
    click.echo(load_config(ctx).model_dump_json(indent=2))


@config.command(name="path")
@click.pass_context
def config_path_cmd(ctx: click.Context):
    """Print the configuration file path."""
    click.echo(str(config_path(ctx)))


@config.command(name="validate")
@click.pass_context
def config_validate(ctx: click.Context):
    """Check the configuration file for errors."""
    path = config_path(ctx)
    if not path.exists():
        click.echo(f"No config file at {path}; defaults are used.")
        return

    is_valid, error = PydanticPersistence.validate_json(path, EngineConfig)
    if is_valid:
        click.echo(f"Configuration is valid: {path}")
    else:
        click.echo(f"Configuration is invalid: {error}", err=True)
        ctx.exit(1)


@config.command(name="reset")
@click.confirmation_option(prompt="Reset configuration to defaults?")
@click.pass_context
def config_reset(ctx: click.Context):
    """Write the default configuration to the config file."""
    path = config_path(ctx)
    try:
        EngineConfig().save(path)
    except (HueSyncError, OSError) as e:
        fail(ctx, e)
    click.echo(f"Configuration reset: {path}")
