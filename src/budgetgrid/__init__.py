"""BudgetGrid: multi-year household budget planning engine."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .context import create_app_context
from .services.session import BudgetSession

__all__ = ["BaseConfig", "BudgetSession", "DevConfig", "create_app_context"]
