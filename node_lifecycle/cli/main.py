"""Command-line interface for node-lifecycle.

Checks where a Node.js version is in its release lifecycle and exits with
a status code suitable for CI:

    0 = supported
    1 = warning (unknown release line, or EOL within --warn-days)
    2 = end-of-life (0 with --no-fail), or invalid usage
"""

import shutil
import subprocess
import sys
from datetime import timedelta
from pathlib import Path
from typing import Optional

import click

from node_lifecycle import __version__
from node_lifecycle._schedule import ScheduleConfig, ScheduleRepository
from node_lifecycle.classifier import classify
from node_lifecycle.console import print_eol, print_near_eol, print_supported, print_unknown
from node_lifecycle.dates import utc_now
from node_lifecycle.exceptions import ConfigurationError
from node_lifecycle.lifecycle import codename_for, recommend_upgrades
from node_lifecycle.logging_config import logger, set_level, set_structured
from node_lifecycle.models import SupportStatus

DEFAULT_WARN_DAYS = 180

EXIT_OK = 0
EXIT_WARNING = 1
EXIT_EOL = 2

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def detect_node_version() -> Optional[str]:
    """
    Return the version of the `node` executable on PATH, e.g. "v22.5.0".

    Returns:
        Version string, or None if node is missing or fails to run
    """
    node = shutil.which("node")
    if not node:
        logger.debug("node executable not found on PATH")
        return None

    try:
        completed = subprocess.run([node, "--version"], capture_output=True, text=True, timeout=10, check=True)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"Could not run {node} --version: {e}")
        return None

    version = completed.stdout.strip()
    return version or None


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--version",
    "node_version",
    metavar="VER",
    help="Check this specific version (default: the `node` on PATH).",
)
@click.option(
    "--warn-days",
    type=click.IntRange(min=0),
    default=DEFAULT_WARN_DAYS,
    show_default=True,
    help="Warn (exit 1) if EOL is within N days.",
)
@click.option(
    "--cache-ttl",
    type=click.FloatRange(min=0),
    default=None,
    metavar="SECS",
    help="Schedule cache TTL in seconds (default: NODE_EOL_CACHE_TTL in ms, or 24h).",
)
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Schedule cache directory (default: NODE_EOL_CACHE_DIR, or $XDG_CACHE_HOME/node-lifecycle).",
)
@click.option("--no-fail", is_flag=True, help="Do not fail (exit 2) on EOL; print ❌ but exit 0.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--log-json", is_flag=True, help="Write log records to stderr as JSON lines.")
@click.version_option(__version__, "--tool-version", prog_name="node-lifecycle")
def cli(
    node_version: Optional[str],
    warn_days: int,
    cache_ttl: Optional[float],
    cache_dir: Optional[Path],
    no_fail: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """Checks the Node.js version lifecycle (current/LTS/maintenance/EOL).

    \b
    Exit codes:
      0 = OK (supported)
      1 = Warning (unknown line, or within warn-days of EOL)
      2 = EOL (unless --no-fail, then 0)
    """
    if log_json:
        set_structured(True)
    if verbose:
        set_level("DEBUG")

    runtime = node_version or detect_node_version()
    if not runtime:
        raise click.UsageError("Could not detect the Node.js version; pass --version.")

    try:
        ttl = timedelta(seconds=cache_ttl) if cache_ttl is not None else None
    except (OverflowError, ValueError):
        raise click.BadParameter(f"{cache_ttl} seconds is out of range.", param_hint="'--cache-ttl'")

    try:
        config = ScheduleConfig.from_env(cache_ttl=ttl, cache_directory=cache_dir)
    except ConfigurationError as e:
        raise click.UsageError(str(e))

    with ScheduleRepository(config) as repository:
        schedule = repository.get_schedule()

    now = utc_now()
    result = classify(runtime, schedule, now)
    logger.debug(f"Classified {runtime}: {result.to_dict()}")

    if result.status is SupportStatus.EOL:
        print_eol(runtime, result, recommend_upgrades(result.major, schedule, now))
        sys.exit(EXIT_OK if no_fail else EXIT_EOL)

    if result.status is SupportStatus.UNKNOWN:
        print_unknown(runtime)
        sys.exit(EXIT_WARNING)

    if result.days_to_eol is not None and result.days_to_eol <= warn_days:
        print_near_eol(runtime, result, recommend_upgrades(result.major, schedule, now))
        sys.exit(EXIT_WARNING)

    print_supported(runtime, result, codename_for(result.major, schedule))
    sys.exit(EXIT_OK)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
