"""Stylesheet compilers (concrete `StyleCompiler` implementations).

Why a package:
- Groups one module per toolchain (Tailwind CLI, rcssmin).
- Each module implements `core.interfaces.toolchain.StyleCompiler`.
"""

from __future__ import annotations

from adapters.style_compilers.rcssmin_compiler import RcssminCompiler
from adapters.style_compilers.tailwind import TailwindCompiler
from core.config import AppSettings
from core.interfaces.toolchain import StyleCompiler


def build_style_compiler(settings: AppSettings | None = None) -> StyleCompiler:
    """Pick the compiler selected by `css_engine`."""

    settings = settings or AppSettings()
    if settings.css_engine == "rcssmin":
        return RcssminCompiler()
    return TailwindCompiler(settings)


__all__ = [
	"RcssminCompiler",
	"TailwindCompiler",
	"build_style_compiler",
]
