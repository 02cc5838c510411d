from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from adapters.style_compilers import RcssminCompiler, TailwindCompiler, build_style_compiler
from core.config import AppSettings
from core.interfaces.toolchain import StyleCompiler


def test_tailwind_command_line(tmp_path: Path) -> None:
    compiler = TailwindCompiler(AppSettings())

    command = compiler.command(tmp_path / "in.css", tmp_path / "out.css")

    assert command == [
        "npx",
        "@tailwindcss/cli",
        "-i",
        str(tmp_path / "in.css"),
        "-o",
        str(tmp_path / "out.css"),
        "--minify",
    ]


def test_tailwind_custom_command_prefix(tmp_path: Path) -> None:
    compiler = TailwindCompiler(AppSettings(tailwind_command="bunx @tailwindcss/cli"))

    assert compiler.command(tmp_path / "a.css", tmp_path / "b.css")[:2] == ["bunx", "@tailwindcss/cli"]


def test_tailwind_compile_runs_and_checks(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen: dict[str, object] = {}

    def fake_run(cmd, **kwargs):
        seen["cmd"] = cmd
        seen["kwargs"] = kwargs
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)
    output = tmp_path / "dist" / "index.css"

    result = TailwindCompiler().compile(tmp_path / "styles.css", output)

    assert result == output
    assert seen["kwargs"] == {"check": True}
    assert seen["cmd"][-1] == "--minify"


def test_tailwind_failure_propagates(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def failing_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(2, cmd)

    monkeypatch.setattr(subprocess, "run", failing_run)

    with pytest.raises(subprocess.CalledProcessError) as excinfo:
        TailwindCompiler().compile(tmp_path / "styles.css", tmp_path / "index.css")
    assert excinfo.value.returncode == 2


def test_tailwind_missing_executable(tmp_path: Path) -> None:
    settings = AppSettings(tailwind_command="definitely-not-a-real-tailwind-binary")

    with pytest.raises(FileNotFoundError):
        TailwindCompiler(settings).compile(tmp_path / "styles.css", tmp_path / "index.css")


def test_rcssmin_strips_whitespace(tmp_path: Path) -> None:
    source = tmp_path / "styles.css"
    source.write_text("/* theme */\nbody {\n  color: red;\n}\n", encoding="utf-8")
    output = tmp_path / "dist" / "index.css"

    RcssminCompiler().compile(source, output)

    css = output.read_text(encoding="utf-8")
    assert css.startswith("body{color:red")
    assert " " not in css
    assert "theme" not in css


def test_build_style_compiler_selects_engine() -> None:
    assert isinstance(build_style_compiler(AppSettings()), TailwindCompiler)
    assert isinstance(build_style_compiler(AppSettings(css_engine="rcssmin")), RcssminCompiler)


def test_compilers_satisfy_protocol() -> None:
    assert isinstance(TailwindCompiler(), StyleCompiler)
    assert isinstance(RcssminCompiler(), StyleCompiler)
