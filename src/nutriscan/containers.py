"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutriscan.config import Settings
from nutriscan.services.analysis import ScanAnalysisService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: ScanAnalysisService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    analysis_service = ScanAnalysisService(debug=resolved_settings.debug_scoring)
    return AppContainer(
        settings=resolved_settings,
        analysis_service=analysis_service,
    )
