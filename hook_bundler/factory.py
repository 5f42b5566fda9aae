"""Service factory for wiring the build service from settings.

Usage:
    from hook_bundler.factory import ServiceFactory

    factory = ServiceFactory(settings)
    service = factory.create_build_service()
    report = service.run()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hook_bundler.adapters.esbuild import EsbuildBundler
from hook_bundler.config import Settings
from hook_bundler.core.paths import HookPaths
from hook_bundler.services.build import HookBuildService

if TYPE_CHECKING:
    from hook_bundler.ports.bundler import BundlerPort


class ServiceFactory:
    """Factory for creating and wiring the build service.

    Example:
        factory = ServiceFactory(settings)
        report = factory.create_build_service().run()
    """

    def __init__(
        self,
        settings: Settings,
        bundler: BundlerPort | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            settings: Application settings.
            bundler: Optional bundler override for testing.
        """
        self._settings = settings
        self._injected_bundler = bundler

    def create_paths(self) -> HookPaths:
        return HookPaths(
            hooks_dir=self._settings.resolved_hooks_dir(),
            dist_dir=self._settings.resolved_dist_dir(),
        )

    def create_bundler(self) -> BundlerPort:
        """Create the bundler.

        Returns:
            The injected bundler, or an EsbuildBundler configured from settings.
        """
        if self._injected_bundler is not None:
            return self._injected_bundler

        return EsbuildBundler(
            options=self._settings.bundle_options(),
            project_root=self._settings.project_root,
            executable=self._settings.esbuild_path,
            timeout=self._settings.bundle_timeout_seconds,
        )

    def create_build_service(self) -> HookBuildService:
        return HookBuildService(
            paths=self.create_paths(),
            bundler=self.create_bundler(),
            hooks_to_bundle=self._settings.hooks_to_bundle,
            hooks_to_copy=self._settings.hooks_to_copy,
        )
