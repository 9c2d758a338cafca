"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from sqlmodel import Session

from .config import BaseConfig
from .domain.repositories import PlanRepository
from .infra.database import create_db_engine, create_session_factory, init_database
from .infra.repositories import SQLModelPlanRepository
from .logging_config import get_logger
from .services import plan_io
from .services.session import BudgetSession

logger = get_logger("context")


@dataclass
class AppContext:
    """Configuration, persistence and the current reference month."""

    config: BaseConfig
    session_factory: Callable[[], Session]
    plan_repo: PlanRepository
    reference_date: date

    def open_session(self) -> BudgetSession:
        """Start an editing session pre-loaded from the plan store."""

        session = BudgetSession(
            reference_date=self.reference_date,
            history_size=self.config.HISTORY_SIZE,
        )
        session.load_rows(self.plan_repo.load_rows(from_year=self.reference_date.year))
        return session

    def save_session(self, session: BudgetSession) -> int:
        """Persist the session's 12-month window and clear its dirty flag."""

        saved = self.plan_repo.save_rows(
            session.to_rows(), months=plan_io.window_months(session.reference_date)
        )
        session.mark_saved()
        return saved


def create_app_context(
    config: Optional[BaseConfig] = None, *, reference_date: Optional[date] = None
) -> AppContext:
    """Create and initialize the application context."""

    if config is None:
        config = BaseConfig()

    engine = create_db_engine(config)
    init_database(engine)
    session_factory = create_session_factory(engine)

    current = (reference_date or date.today()).replace(day=1)
    logger.debug("App context created", extra={"database_url": config.DATABASE_URL})

    return AppContext(
        config=config,
        session_factory=session_factory,
        plan_repo=SQLModelPlanRepository(session_factory),
        reference_date=current,
    )
