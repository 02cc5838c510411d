"""Stylesheet compiler: rcssmin (in-process).

Fallback for machines without Node.js. It only minifies: no Tailwind
directives are expanded, so it suits plain stylesheets.
"""

from __future__ import annotations

from pathlib import Path

import rcssmin

from core.interfaces.toolchain import StyleCompiler


class RcssminCompiler(StyleCompiler):
    def compile(self, source: Path, output: Path) -> Path:
        css = source.read_text(encoding="utf-8")
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rcssmin.cssmin(css), encoding="utf-8")
        return output
