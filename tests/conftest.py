"""Pytest configuration and shared fixtures for sheetcut tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sheetcut.application.commands import ComputeCutPlanCommand
from sheetcut.domain import StrategySearch

FIXTURES_PATH = Path(__file__).parent / "fixtures"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests through the CLI or REST API"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def jobs_path() -> Path:
    """Directory holding JSON job file fixtures."""
    return FIXTURES_PATH / "jobs"


@pytest.fixture
def search() -> StrategySearch:
    """Sequential strategy search over the full grid."""
    return StrategySearch()


@pytest.fixture
def cut_plan_command(search: StrategySearch) -> ComputeCutPlanCommand:
    """ComputeCutPlanCommand with default limits."""
    return ComputeCutPlanCommand(search=search)
