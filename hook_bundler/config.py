"""Configuration system for the hook bundler."""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from hook_bundler.core.models import BundleOptions
from hook_bundler.core.paths import expand_path, normalize_path

DEFAULT_HOOKS_TO_BUNDLE: list[str] = [
    "gsd-intel-index.js",
]

DEFAULT_HOOKS_TO_COPY: list[str] = [
    "gsd-intel-session.js",
    "gsd-intel-prune.js",
    "gsd-check-update.js",
    "gsd-statusline.js",
]


class Settings(BaseSettings):
    """Hook Bundler Configuration."""

    # Layout
    project_root: Path = Field(
        default=Path("."),
        validate_default=True,
        description="Base directory for relative paths and node_modules lookup",
    )
    hooks_dir: Path = Field(
        default=Path("hooks"),
        description="Directory holding the hook sources (relative to project_root)",
    )
    dist_dir: Path | None = Field(
        default=None,
        description="Output directory (defaults to <hooks_dir>/dist)",
    )

    # Hook lists
    hooks_to_bundle: list[str] = Field(
        default_factory=lambda: list(DEFAULT_HOOKS_TO_BUNDLE),
        description="Hooks with npm dependencies that must be bundled",
    )
    hooks_to_copy: list[str] = Field(
        default_factory=lambda: list(DEFAULT_HOOKS_TO_COPY),
        description="Pure Node.js hooks copied verbatim",
    )

    # esbuild
    esbuild_path: Path | None = Field(
        default=None,
        description="Explicit esbuild executable (auto-detected if not set)",
    )
    target: str = Field(
        default="node18",
        min_length=1,
        description="Minimum runtime the generated code must support",
    )
    output_format: Literal["cjs", "esm", "iife"] = Field(
        default="cjs",
        description="Module format of the bundled artifact",
    )
    minify: bool = Field(
        default=True,
        description="Minify bundled output",
    )
    keep_names: bool = Field(
        default=True,
        description="Preserve function and class names when minifying",
    )
    node_env: str = Field(
        default="production",
        description="Value baked in for process.env.NODE_ENV",
    )
    bundle_timeout_seconds: float | None = Field(
        default=None,
        gt=0.0,
        description="Per-entry bundler timeout (None = no limit)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines instead of plain progress text",
    )

    model_config = {
        "env_prefix": "HOOK_BUNDLER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("project_root")
    @classmethod
    def _normalize_project_root(cls, value: Path) -> Path:
        return normalize_path(value)

    @field_validator("hooks_dir", "dist_dir", "esbuild_path")
    @classmethod
    def _expand_paths(cls, value: Path | None) -> Path | None:
        return None if value is None else expand_path(value)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    def resolved_hooks_dir(self) -> Path:
        """Absolute hooks directory."""
        if self.hooks_dir.is_absolute():
            return self.hooks_dir
        return (self.project_root / self.hooks_dir).resolve()

    def resolved_dist_dir(self) -> Path:
        """Absolute output directory, nested under the hooks directory by default."""
        if self.dist_dir is None:
            return self.resolved_hooks_dir() / "dist"
        if self.dist_dir.is_absolute():
            return self.dist_dir
        return (self.project_root / self.dist_dir).resolve()

    def bundle_options(self) -> BundleOptions:
        """Build the fixed option set shared by every bundled entry."""
        return BundleOptions(
            target=self.target,
            format=self.output_format,
            minify=self.minify,
            keep_names=self.keep_names,
            define={"process.env.NODE_ENV": f'"{self.node_env}"'},
        )


# Settings singleton with dependency injection support
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the settings instance (lazy-loaded singleton).

    Returns:
        The Settings instance.

    Example:
        from hook_bundler.config import get_settings
        settings = get_settings()
        print(settings.resolved_dist_dir())
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override the settings instance (for testing).

    Args:
        new_settings: The new Settings instance to use.

    Example:
        from hook_bundler.config import override_settings, Settings
        override_settings(Settings(hooks_dir="/tmp/hooks"))
    """
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to None (forces reload on next get_settings call)."""
    global _settings
    _settings = None

