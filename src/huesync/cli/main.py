"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from huesync import __version__
from huesync.models import DEFAULT_CONFIG_PATH

from .commands import config, presets, show

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Nothing is configured unless asked for, so command output stays clean.

    Args:
        verbose: Verbosity count (1 = INFO, 2+ = DEBUG), logged to stderr
        debug: If True, log at DEBUG to ./huesync-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level for the custom log file (DEBUG/INFO/WARNING/ERROR)
    """
    if not (verbose or debug or log_file):
        return

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_file = Path.cwd() / "huesync-debug.log"

    if log_file:
        # Keeps last 5 files, max 10MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    else:
        handler = logging.StreamHandler()

    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(
        f"Logging configured: level={logging.getLevelName(level)}, "
        f"destination={log_file or 'stderr'}"
    )


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="huesync")
@click.option(
    '--config',
    'config_file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help='Configuration file'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Log to stderr (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./huesync-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for --log-file (default: INFO)'
)
def cli(
    ctx: click.Context,
    config_file: Path,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    huesync - one color, three views: HSL, RGB and HEX.

    Edits to any view are converted into the other two with the same
    integer rounding a browser color picker uses.

    \b
    Examples:
      # Show the default color
      huesync

      # Convert a color
      huesync show '#ff00ff'
      huesync show --hsl 249 78 73

      # List preset swatches
      huesync presets

      # Inspect configuration
      huesync config show
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_file

    if ctx.invoked_subcommand is None:
        ctx.invoke(show)


cli.add_command(show)
cli.add_command(presets)
cli.add_command(config)

if __name__ == "__main__":
    cli()
