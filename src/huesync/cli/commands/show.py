"""Show command: print one color as HEX, RGB and HSL."""

from typing import Optional

import click

from huesync.cli.output import echo_snapshot, fail, load_config
from huesync.core import ColorEngine
from huesync.exceptions import HueSyncError


@click.command(name="show")
@click.argument("hex_value", required=False, metavar="[HEX]")
@click.option(
    "--hsl",
    "hsl",
    nargs=3,
    type=(int, click.IntRange(0, 100), click.IntRange(0, 100)),
    default=None,
    metavar="H S L",
    help="Color as hue (degrees), saturation and lightness (percent)",
)
@click.option(
    "--rgb",
    "rgb",
    nargs=3,
    type=str,
    default=None,
    metavar="R G B",
    help="Color as red, green and blue (0-255, out-of-range values are clamped)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the snapshot as JSON")
@click.pass_context
def show(
    ctx: click.Context,
    hex_value: Optional[str],
    hsl: Optional[tuple[int, int, int]],
    rgb: Optional[tuple[str, str, str]],
    as_json: bool,
):
    """
    Show a color in HEX, RGB and HSL.

    Give the color as HEX (the '#' is optional), or with --hsl or --rgb.
    Without any of them the configured default color is shown.

    \b
    Examples:
      huesync show 667eea
      huesync show --hsl 300 100 50
      huesync show --rgb 255 0 255 --json
    """
    given = [value for value in (hex_value, hsl, rgb) if value]
    if len(given) > 1:
        raise click.UsageError("Give the color as HEX, --hsl or --rgb, not several.")

    engine = ColorEngine(load_config(ctx))

    try:
        if hex_value:
            engine.set_preset(hex_value)
        elif hsl:
            engine.set_hsl(*hsl)
        elif rgb:
            for channel, raw in zip("rgb", rgb):
                engine.set_rgb_component(channel, raw)
    except HueSyncError as e:
        fail(ctx, e)

    echo_snapshot(engine.get_canonical(), as_json=as_json)
