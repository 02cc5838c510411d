"""Contracts for the external build tools.

Why Protocol:
- Structural contracts (duck typing) without rigid inheritance.
- The CSS compiler and the HTML minifier stay swappable, so the pipeline can
  be tested with fakes instead of spawning Node.js or touching real tools.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from core.domain.models import MinifyOptions


@runtime_checkable
class StyleCompiler(Protocol):
    """Turns the source stylesheet into a minified stylesheet.

    Design rules:
    - `compile` blocks until the tool finishes.
    - Failures propagate; the pipeline does not inspect CSS.
    """

    def compile(self, source: Path, output: Path) -> Path:
        """Compile `source` into `output` and return the written path."""

        ...


@runtime_checkable
class MarkupMinifier(Protocol):
    """Pure text transform from HTML to minified HTML."""

    def minify(self, markup: str, options: MinifyOptions) -> str:
        ...
