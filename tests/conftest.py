from __future__ import annotations

from pathlib import Path

import pytest

from core.domain.models import MinifyOptions


SAMPLE_CSS = "body { color: red; }\n"
SAMPLE_HTML = "<!DOCTYPE html><html><body>   <p>Hi</p>   </body></html>"


class FakeCompiler:
    """Writes the source stylesheet with whitespace squeezed out."""

    def __init__(self) -> None:
        self.calls: list[tuple[Path, Path]] = []

    def compile(self, source: Path, output: Path) -> Path:
        self.calls.append((source, output))
        css = source.read_text(encoding="utf-8")
        output.write_text("".join(css.split()), encoding="utf-8")
        return output


class FakeMinifier:
    def __init__(self) -> None:
        self.options: list[MinifyOptions] = []

    def minify(self, markup: str, options: MinifyOptions) -> str:
        self.options.append(options)
        return " ".join(markup.split())


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "styles.css").write_text(SAMPLE_CSS, encoding="utf-8")
    (tmp_path / "src" / "index.html").write_text(SAMPLE_HTML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def favicon(project: Path) -> bytes:
    payload = bytes(range(256)) * 4
    (project / "favicon.ico").write_bytes(payload)
    return payload


@pytest.fixture
def fake_compiler() -> FakeCompiler:
    return FakeCompiler()


@pytest.fixture
def fake_minifier() -> FakeMinifier:
    return FakeMinifier()


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("WEBBUNDLE_CSS_ENGINE", "WEBBUNDLE_TAILWIND_COMMAND", "WEBBUNDLE_GZIP_LEVEL"):
        monkeypatch.delenv(name, raising=False)
