"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- The report lines are plain functions, easy to assert on in tests.
"""

from __future__ import annotations

from pathlib import Path

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.models import ArtifactSize, BuildReport


STAGE_ICONS: dict[str, str] = {
    "Setting up dist directory": "📁",
    "Building optimized CSS": "🎨",
    "Minifying HTML": "📄",
    "Copying static assets": "📦",
    "Gzipping files": "🗜️ ",
}


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Can be turned off (`--no-banner`) for CI logs.
    """

    title = Text("webbundle", style="bold cyan")
    subtitle = Text("Building production bundle", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_stage(console: Console, name: str) -> None:
    icon = STAGE_ICONS.get(name, "•")
    console.print(f"{icon} {name}...", markup=False)


def print_warning(console: Console, message: str) -> None:
    console.print(Text(f"⚠️  {message}", style="yellow"))


def format_artifact_line(artifact: ArtifactSize) -> str:
    """`index.html: 1.23 KB` plus the gzip figures when they exist."""

    line = f"{artifact.name}: {artifact.size_kb:.2f} KB"
    if artifact.gzip_kb is not None:
        line += (
            f" ({artifact.gzip_kb:.2f} KB gzipped,"
            f" {artifact.reduction_percent:.1f}% smaller)"
        )
    return line


def output_label(report: BuildReport, root: Path) -> str:
    """`./dist` when the output directory sits under `root`."""

    try:
        return f"./{report.output_dir.relative_to(root).as_posix()}"
    except ValueError:
        return str(report.output_dir)


def print_report(console: Console, report: BuildReport, *, root: Path) -> None:
    console.print("\n✅ Build completed successfully!\n", style="bold green")
    console.print("📊 Bundle sizes:")
    for artifact in report.artifacts:
        console.print(f"   - {format_artifact_line(artifact)}", markup=False, highlight=False)
    if report.favicon_copied:
        console.print("   - favicon.ico: copied", markup=False, highlight=False)
    console.print(f"\n📁 Output directory: {output_label(report, root)}", markup=False)
