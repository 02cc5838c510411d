"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  Core to I/O libraries.
- Values such as the layout or the report are immutable and easy to compare in
  tests.

Note:
- These models describe *what* a bundle is, not *how* it gets built.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class BundleLayout(BaseModel):
    """Fixed project layout, relative to the project root.

    The paths are not user-configurable: the build works for exactly one
    layout. `resolve` anchors them to a concrete root.
    """

    model_config = ConfigDict(frozen=True)

    styles_source: Path = Path("src/styles.css")
    markup_source: Path = Path("src/index.html")
    favicon_source: Path = Path("favicon.ico")
    output_dir: Path = Path("dist")
    styles_output: Path = Path("dist/index.css")
    markup_output: Path = Path("dist/index.html")
    favicon_output: Path = Path("dist/favicon.ico")

    def resolve(self, root: Path) -> "BundleLayout":
        """Return a copy with every path anchored at `root`."""

        return BundleLayout(**{name: root / value for name, value in self})


class BuildConfig(BaseModel):
    """Per-run parameters.

    The compression flag travels here instead of being read from `sys.argv`
    deep inside the pipeline.
    """

    model_config = ConfigDict(frozen=True)

    root: Path = Field(
        default_factory=Path.cwd,
        description="Project root containing src/, favicon.ico and dist/.",
    )
    gzip: bool = Field(
        default=False,
        description="Write .gz siblings and report compression ratios.",
    )
    layout: BundleLayout = Field(default_factory=BundleLayout)

    def resolved_layout(self) -> BundleLayout:
        return self.layout.resolve(self.root)


class MinifyOptions(BaseModel):
    """Flat option table for HTML minification.

    Defaults reproduce the production build. `collapse_whitespace` and
    `remove_attribute_quotes` are always applied by minify-html, so turning
    them off is rejected instead of being silently ignored.
    """

    model_config = ConfigDict(frozen=True)

    collapse_whitespace: bool = True
    remove_comments: bool = True
    remove_redundant_attributes: bool = True
    remove_script_type_attributes: bool = True
    remove_style_link_type_attributes: bool = True
    use_short_doctype: bool = True
    minify_css: bool = True
    minify_js: bool = True
    remove_attribute_quotes: bool = True
    sort_attributes: bool = True
    sort_class_name: bool = True

    @field_validator("collapse_whitespace", "remove_attribute_quotes")
    @classmethod
    def _always_on(cls, value: bool, info) -> bool:
        if not value:
            raise ValueError(f"{info.field_name} cannot be disabled with minify-html")
        return value

    def rewrites_attributes(self) -> bool:
        """True when the attribute normalization pass has work to do."""

        return any(
            (
                self.remove_redundant_attributes,
                self.remove_script_type_attributes,
                self.remove_style_link_type_attributes,
                self.sort_attributes,
                self.sort_class_name,
            )
        )


class ArtifactSize(BaseModel):
    """Size figures for one produced file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="File name inside the output directory.")
    size_bytes: int = Field(..., ge=0)
    gzip_bytes: int | None = Field(
        default=None,
        ge=0,
        description="Size of the .gz sibling, when compression ran.",
    )

    @property
    def size_kb(self) -> float:
        return round(self.size_bytes / 1024, 2)

    @property
    def gzip_kb(self) -> float | None:
        if self.gzip_bytes is None:
            return None
        return round(self.gzip_bytes / 1024, 2)

    @property
    def reduction_percent(self) -> float | None:
        """(original - compressed) / original * 100, one decimal."""

        if self.gzip_bytes is None:
            return None
        if self.size_bytes == 0:
            return 0.0
        return round((self.size_bytes - self.gzip_bytes) / self.size_bytes * 100, 1)


class BuildReport(BaseModel):
    """Outcome of a build, ready for presentation."""

    output_dir: Path
    artifacts: list[ArtifactSize] = Field(default_factory=list)
    favicon_copied: bool = False
