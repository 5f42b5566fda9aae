"""Pytest fixtures for hook bundler tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from hook_bundler.config import Settings, override_settings, reset_settings
from hook_bundler.core.errors import BundleError
from hook_bundler.core.paths import HookPaths
from hook_bundler.services.build import HookBuildService

BUNDLED_BANNER = b"/* bundled */\n"

# ---------------------------------------------------------------------------
# Fake bundler
# ---------------------------------------------------------------------------


class FakeBundler:
    """In-process bundler port: prefixes a banner to the source bytes.

    Names listed in ``fail_on`` raise BundleError instead of writing output.
    """

    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.fail_on = fail_on or set()
        self.calls: list[tuple[Path, Path]] = []

    def bundle(self, entry_point: Path, outfile: Path) -> None:
        self.calls.append((entry_point, outfile))
        if entry_point.name in self.fail_on:
            raise BundleError(
                f"esbuild failed for {entry_point.name}:\nExpected \";\" but found \"}}\"",
                name=entry_point.name,
            )
        outfile.write_bytes(BUNDLED_BANNER + entry_point.read_bytes())


# ---------------------------------------------------------------------------
# Basic fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """Undo configure_logging() so handlers never outlive captured streams."""
    root = logging.getLogger()
    level = root.level
    yield
    # pytest's capture handlers are subclasses; only plain console handlers go
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def hooks_dir(tmp_path: Path) -> Path:
    """Provide a hooks directory holding a.js, b.js and c.js."""
    hooks = tmp_path / "hooks"
    hooks.mkdir()
    (hooks / "a.js").write_text(
        "#!/usr/bin/env node\nconst dep = require('dep');\ndep.run();\n",
        encoding="utf-8",
    )
    (hooks / "b.js").write_bytes(b"#!/usr/bin/env node\nconsole.log('b');\n")
    (hooks / "c.js").write_bytes(b"#!/usr/bin/env node\r\nconsole.log('c\xe2\x9c\x93');\r\n")
    return hooks


@pytest.fixture
def dist_dir(hooks_dir: Path) -> Path:
    """Output directory nested under the hooks directory (not created)."""
    return hooks_dir / "dist"


@pytest.fixture
def fake_bundler() -> FakeBundler:
    """Provide a bundler that succeeds for every entry."""
    return FakeBundler()


@pytest.fixture
def make_bundler() -> Callable[..., FakeBundler]:
    """Factory fixture for fake bundlers that fail on the given names."""

    def _make_bundler(*fail_on: str) -> FakeBundler:
        return FakeBundler(fail_on=set(fail_on))

    return _make_bundler


@pytest.fixture
def test_settings(tmp_path: Path, hooks_dir: Path) -> Generator[Settings, None, None]:
    """Provide test settings pointing at the temporary hooks tree."""
    settings = Settings(
        project_root=tmp_path,
        hooks_dir=hooks_dir,
        hooks_to_bundle=["a.js"],
        hooks_to_copy=["b.js", "c.js"],
        log_level="INFO",
    )
    override_settings(settings)
    yield settings
    reset_settings()


@pytest.fixture
def make_service(
    hooks_dir: Path,
    dist_dir: Path,
) -> Callable[..., HookBuildService]:
    """Factory fixture for creating HookBuildService instances.

    Usage:
        def test_something(make_service, fake_bundler):
            service = make_service(fake_bundler, to_bundle=["a.js"])
    """

    def _make_service(
        bundler: object,
        to_bundle: list[str] | None = None,
        to_copy: list[str] | None = None,
    ) -> HookBuildService:
        return HookBuildService(
            paths=HookPaths(hooks_dir=hooks_dir, dist_dir=dist_dir),
            bundler=bundler,  # type: ignore[arg-type]
            hooks_to_bundle=["a.js"] if to_bundle is None else to_bundle,
            hooks_to_copy=["b.js", "c.js"] if to_copy is None else to_copy,
        )

    return _make_service
