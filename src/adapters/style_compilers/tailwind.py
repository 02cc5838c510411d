"""Stylesheet compiler: Tailwind CLI.

- Shells out to `@tailwindcss/cli` with `--minify`, the same way the build was
  always done with Node.js tooling.
- The process blocks until Tailwind exits. A non-zero exit raises
  `subprocess.CalledProcessError`; a missing executable raises
  `FileNotFoundError`.
"""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path

from core.config import AppSettings
from core.interfaces.toolchain import StyleCompiler


class TailwindCompiler(StyleCompiler):
    """Compiles the source stylesheet through the Tailwind CLI."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def command(self, source: Path, output: Path) -> list[str]:
        return [
            *shlex.split(self._settings.tailwind_command),
            "-i",
            str(source),
            "-o",
            str(output),
            "--minify",
        ]

    def compile(self, source: Path, output: Path) -> Path:
        subprocess.run(self.command(source, output), check=True)
        return output
