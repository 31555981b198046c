"""Rich console utilities for node-lifecycle.

This module provides the shared Rich Console instances and the printers
for the human-readable lifecycle report.
"""

import os
from typing import List, Sequence

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from node_lifecycle.dates import format_friendly_date
from node_lifecycle.lifecycle import UpgradeTarget
from node_lifecycle.models import Classification

# Detect CI environments
IS_GITHUB_ACTIONS = os.getenv("GITHUB_ACTIONS") == "true"

custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "highlight": "magenta",
    }
)

# Shared console instances; OK reports go to stdout, warnings and EOL to stderr.
# soft_wrap keeps each report line intact when output is piped.
console = Console(
    theme=custom_theme,
    force_terminal=IS_GITHUB_ACTIONS or None,
    highlight=False,
    soft_wrap=True,
)
err_console = Console(
    theme=custom_theme,
    force_terminal=IS_GITHUB_ACTIONS or None,
    highlight=False,
    soft_wrap=True,
    stderr=True,
)


def join_targets(targets: Sequence[UpgradeTarget]) -> str:
    """Render upgrade targets as "LTS v22 (“Jod”) or Current v24"."""
    return " or ".join(str(target) for target in targets)


def _eol_date(result: Classification) -> str:
    """End-of-life date and its friendly form, escaped for markup."""
    return f"{escape(result.eol or '')} ({escape(format_friendly_date(result.eol))})"


def _eol_text(result: Classification) -> str:
    return f"EOL {_eol_date(result)} in {result.days_to_eol} days."


def print_eol(runtime: str, result: Classification, targets: List[UpgradeTarget]) -> None:
    """Report a release line that has reached end-of-life."""
    err_console.print(
        f"[error]❌ Node {escape(runtime)} (major {result.major}) is EOL as of {_eol_date(result)}.[/error]",
    )
    if targets:
        err_console.print(f"Recommendation: Update to {join_targets(targets)}.", markup=False)


def print_unknown(runtime: str) -> None:
    """Report a version with no schedule data."""
    err_console.print(f"[warning]⚠️  Node {escape(runtime)} → unknown release line (no schedule data).[/warning]")


def print_near_eol(runtime: str, result: Classification, targets: List[UpgradeTarget]) -> None:
    """Report a supported release line that is close to end-of-life."""
    err_console.print(
        f"[warning]⚠️  Node {escape(runtime)} (major {result.major}) → {result.status.value}. {_eol_text(result)}[/warning]"
    )
    if targets:
        err_console.print(f"Consider upgrading to {join_targets(targets)}.", markup=False)


def print_supported(runtime: str, result: Classification, codename: str = "") -> None:
    """Report a supported release line."""
    suffix = f" (“{codename}”)" if codename else ""
    console.print(
        f"[success]✅ Node {escape(runtime)} (major {result.major}){suffix} → {result.status.value}. {_eol_text(result)}[/success]"
    )
