"""Core configuration.

Why here:
- Centralizes the environment-driven toolchain knobs (pydantic-settings) without
  leaking them into the CLI.
- Lets adapters (Tailwind/rcssmin/gzip) read settings consistently.

Only the external tools are tunable. The project layout is fixed and lives in
`core.domain.models.BundleLayout`.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without polluting the Core.
    - A single configuration contract for the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="WEBBUNDLE_",
        extra="ignore",
        case_sensitive=False,
    )

    css_engine: Literal["tailwind", "rcssmin"] = Field(
        default="tailwind",
        description="Stylesheet compiler: Tailwind CLI (Node.js) or in-process rcssmin.",
    )
    tailwind_command: str = Field(
        default="npx @tailwindcss/cli",
        min_length=1,
        description="Command prefix used to invoke the Tailwind CLI.",
    )
    gzip_level: int = Field(
        default=9,
        ge=1,
        le=9,
        description="Compression level for the .gz variants.",
    )
