"""Bundle build orchestration.

This module holds the whole build flow: reset the output directory, compile
the stylesheet, minify the document, copy the favicon, optionally gzip, and
measure the results. The CLI only wires collaborators and renders progress,
so every stage can be exercised in isolation (tests, other entry-points) and
side-effects such as printing stay out of the core logic.

Stages run strictly in order and each one consumes the previous stage's
files. The first exception aborts the build; nothing is caught or retried
here.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from adapters.compression import gzip_sibling_path, write_gzip_sibling
from core.config import AppSettings
from core.domain.models import (
    ArtifactSize,
    BuildConfig,
    BuildReport,
    BundleLayout,
    MinifyOptions,
)
from core.interfaces.toolchain import MarkupMinifier, StyleCompiler


MISSING_FAVICON_WARNING = "No favicon.ico found, skipping..."


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress, warnings)."""

    stage_start: Callable[[str], None] | None = None
    warning: Callable[[str], None] | None = None


@dataclass
class PipelineResult:
    """Output of a build."""

    report: BuildReport
    warnings: list[str] = field(default_factory=list)


@dataclass
class Stage:
    """One named step of the build."""

    name: str
    run: Callable[[], object]


def reset_workspace(layout: BundleLayout) -> Path:
    """Remove whatever sits at the output path and recreate it as an empty directory.

    A file or symlink in place of `dist` is unlinked; a symlink target is never
    touched.
    """

    output_dir = layout.output_dir
    if output_dir.is_symlink() or output_dir.is_file():
        output_dir.unlink()
    elif output_dir.exists():
        shutil.rmtree(output_dir)
    layout.output_dir.mkdir(parents=True)
    return layout.output_dir


def compile_styles(layout: BundleLayout, compiler: StyleCompiler) -> Path:
    return compiler.compile(layout.styles_source, layout.styles_output)


def minify_markup(
    layout: BundleLayout,
    minifier: MarkupMinifier,
    options: MinifyOptions,
) -> Path:
    markup = layout.markup_source.read_text(encoding="utf-8")
    layout.markup_output.write_text(minifier.minify(markup, options), encoding="utf-8")
    return layout.markup_output


def copy_assets(
    layout: BundleLayout,
    warn: Callable[[str], None],
) -> bool:
    """Copy the favicon when present.

    A missing favicon is the one missing input that does not fail the build.
    Returns whether the file was copied.
    """

    if not layout.favicon_source.is_file():
        warn(MISSING_FAVICON_WARNING)
        return False
    shutil.copyfile(layout.favicon_source, layout.favicon_output)
    return True


def compress_outputs(layout: BundleLayout, *, level: int = 9) -> list[Path]:
    return [
        write_gzip_sibling(layout.styles_output, level=level),
        write_gzip_sibling(layout.markup_output, level=level),
    ]


def measure_artifact(path: Path, *, gzipped: bool) -> ArtifactSize:
    gzip_bytes = gzip_sibling_path(path).stat().st_size if gzipped else None
    return ArtifactSize(
        name=path.name,
        size_bytes=path.stat().st_size,
        gzip_bytes=gzip_bytes,
    )


def build_report(
    layout: BundleLayout,
    *,
    gzipped: bool,
    favicon_copied: bool,
) -> BuildReport:
    """Sizes of the document and the stylesheet, in that order."""

    return BuildReport(
        output_dir=layout.output_dir,
        artifacts=[
            measure_artifact(layout.markup_output, gzipped=gzipped),
            measure_artifact(layout.styles_output, gzipped=gzipped),
        ],
        favicon_copied=favicon_copied,
    )


def run_build(
    config: BuildConfig,
    *,
    compiler: StyleCompiler,
    minifier: MarkupMinifier,
    options: MinifyOptions | None = None,
    settings: AppSettings | None = None,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    hooks = hooks or PipelineHooks()
    options = options or MinifyOptions()
    settings = settings or AppSettings()
    layout = config.resolved_layout()
    warnings: list[str] = []
    favicon_copied = False

    def warn(message: str) -> None:
        warnings.append(message)
        if hooks.warning:
            hooks.warning(message)

    def copy_favicon() -> None:
        nonlocal favicon_copied
        favicon_copied = copy_assets(layout, warn)

    stages = [
        Stage("Setting up dist directory", lambda: reset_workspace(layout)),
        Stage("Building optimized CSS", lambda: compile_styles(layout, compiler)),
        Stage("Minifying HTML", lambda: minify_markup(layout, minifier, options)),
        Stage("Copying static assets", copy_favicon),
    ]
    if config.gzip:
        stages.append(
            Stage("Gzipping files", lambda: compress_outputs(layout, level=settings.gzip_level))
        )

    for stage in stages:
        if hooks.stage_start:
            hooks.stage_start(stage.name)
        stage.run()

    report = build_report(layout, gzipped=config.gzip, favicon_copied=favicon_copied)
    return PipelineResult(report=report, warnings=warnings)
