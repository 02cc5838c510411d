"""Typer entry point.

One command, no subcommands: `webbundle [--gzip]` builds `./dist` from the
project in the current directory.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from adapters.markup_minifier import MinifyHtmlMinifier
from adapters.style_compilers import build_style_compiler
from cli.ui_components import print_banner, print_report, print_stage, print_warning
from core.config import AppSettings
from core.domain.models import BuildConfig
from core.services.bundle_pipeline import PipelineHooks, run_build

app = typer.Typer(add_completion=False, help="Build the production web bundle.")

_console = Console()


@app.command()
def build(
    gzip: bool = typer.Option(
        False,
        "--gzip",
        help="Also write .gz variants and report compression ratios.",
    ),
    banner: bool = typer.Option(
        True,
        "--banner/--no-banner",
        help="Show the title panel.",
    ),
) -> None:
    """Compile CSS, minify HTML, copy the favicon and report bundle sizes."""

    settings = AppSettings()
    config = BuildConfig(root=Path.cwd(), gzip=gzip)

    if banner:
        print_banner(_console)

    hooks = PipelineHooks(
        stage_start=lambda name: print_stage(_console, name),
        warning=lambda message: print_warning(_console, message),
    )

    try:
        result = run_build(
            config,
            compiler=build_style_compiler(settings),
            minifier=MinifyHtmlMinifier(),
            settings=settings,
            hooks=hooks,
        )
    except subprocess.CalledProcessError as exc:
        _console.print(f"[red]Command failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=exc.returncode or 1) from exc

    print_report(_console, result.report, root=config.root)


def run() -> None:
    app()
