"""Pytest configuration and shared fixtures for BudgetGrid tests.

This module provides database fixtures, a fixed reference month and helper
utilities for testing the grid engine, the plan repository and the CLI
without touching a real application database.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from budgetgrid.config import TestConfig
from budgetgrid.constants.categories import Bucket
from budgetgrid.context import AppContext
from budgetgrid.infra.database import create_session_factory
from budgetgrid.infra.repositories import SQLModelPlanRepository
from budgetgrid.models import PlanRow  # noqa: F401  (registers the table)
from budgetgrid.services.registry import Category, CategoryRegistry
from budgetgrid.services.session import BudgetSession

REFERENCE_DATE = date(2025, 1, 1)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one used by the application context."""

    return create_session_factory(db_engine)


@pytest.fixture
def plan_repo(session_factory) -> SQLModelPlanRepository:
    return SQLModelPlanRepository(session_factory)


@pytest.fixture
def test_config(tmp_path, monkeypatch) -> TestConfig:
    """Config whose data directory lives under the test's tmp_path."""

    monkeypatch.setenv("BUDGETGRID_DATA_DIR", str(tmp_path))
    return TestConfig()


@pytest.fixture
def app_context(test_config, session_factory, plan_repo) -> AppContext:
    """Application context bound to the per-test database and REFERENCE_DATE."""

    return AppContext(
        config=test_config,
        session_factory=session_factory,
        plan_repo=plan_repo,
        reference_date=REFERENCE_DATE,
    )


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def reference_date() -> date:
    return REFERENCE_DATE


@pytest.fixture
def registry() -> CategoryRegistry:
    """Default categories plus a LIVING "rent" row used by the scenario tests."""

    defaults = list(CategoryRegistry())
    return CategoryRegistry([*defaults, Category(id="rent", name="Rent", bucket=Bucket.LIVING)])


@pytest.fixture
def budget_session(registry) -> BudgetSession:
    """A fresh, empty editing session at REFERENCE_DATE in MONTHLY view."""

    return BudgetSession(reference_date=REFERENCE_DATE, registry=registry)


@pytest.fixture
def plan_row_factory():
    """Factory for unsaved PlanRow instances with sensible defaults."""

    def _create_row(
        *,
        year: int = REFERENCE_DATE.year,
        month: int = REFERENCE_DATE.month,
        bucket: str = "Living",
        category: str = "🏠 Housing",
        amount: float = 1000.0,
    ) -> PlanRow:
        return PlanRow(year=year, month=month, bucket=bucket, category=category, amount=amount)

    return _create_row


# =============================================================================
# Helper Functions
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 1e-6):
    """Assert that two floats are equal within a tolerance.

    Even splits such as 100 / 3 are not exactly representable, so sums of
    split months are compared approximately.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    diff = abs(actual - expected)
    assert diff <= tolerance, (
        f"Float values not equal: {actual} != {expected} (diff: {diff}, tolerance: {tolerance})"
    )
