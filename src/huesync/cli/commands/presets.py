"""Presets command: list the preset swatches."""

import click

from huesync.cli.output import load_config
from huesync.colors import preset_name
from huesync.models import Color


@click.command(name="presets")
@click.pass_context
def presets(ctx: click.Context):
    """List the preset swatches with their RGB and HSL values."""
    config = load_config(ctx)

    if not config.presets:
        click.echo("No presets configured.")
        return

    for preset in config.presets:
        color = Color.from_hex(preset)
        line = f"{preset}  {color.to_css():<20}  {color.to_hsl().to_css():<20}"
        name = preset_name(preset)
        if name:
            line += f"  {name}"
        click.echo(line.rstrip())
