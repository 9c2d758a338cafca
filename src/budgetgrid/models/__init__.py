"""SQLModel table exports."""

from .plan import PlanRow

__all__ = ["PlanRow"]
