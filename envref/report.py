"""Console rendering for missing environment variable warnings."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape

from envref.core.settings import Settings, get_settings
from envref.diff import CheckReport
from envref.environment import OPT_OUT_VARIABLE


def make_console() -> Console:
    """Console bound to stdout that never wraps or auto-highlights."""
    return Console(highlight=False, soft_wrap=True)


def render_report(
    report: CheckReport,
    settings: Optional[Settings] = None,
    console: Optional[Console] = None,
) -> None:
    """Print the missing-variable warning for report.

    Prints nothing when report has no missing variables.
    """
    if not report.has_missing:
        return

    settings = settings or get_settings()
    console = console or make_console()

    console.print()
    console.print(
        "[yellow]Warning: [/yellow]"
        "The following environment variables are referenced in your code but not defined:"
    )
    console.print()

    for missing in report.missing:
        console.print(f"  [cyan]{escape(missing.name)}[/cyan]")
        if missing.suggestion:
            console.print(
                f"    [dim]Did you mean[/dim] [cyan]{escape(missing.suggestion)}[/cyan][dim]?[/dim]"
            )

    console.print()
    console.print(
        "To fix this, add the missing variables to your [cyan].env[/cyan] file "
        "or set them in your environment."
    )
    console.print("For example, add this line to your [cyan].env[/cyan] file:")
    console.print()
    console.print(f"[dim]  {escape(report.missing[0].name)}=your_value_here[/dim]")
    console.print()
    console.print(f"Learn more: [cyan]{escape(settings.docs_url)}[/cyan]")
    console.print()
    console.print(
        f"[dim]To disable this check, set {OPT_OUT_VARIABLE}=true in your environment.[/dim]"
    )
    console.print()


def render_failure_warning(console: Optional[Console] = None) -> None:
    """Print the generic advisory shown when validation itself failed."""
    console = console or make_console()
    console.print()
    console.print(
        "[yellow]Warning: Unable to validate environment variables. Continuing anyway.[/yellow]"
    )
    console.print()
