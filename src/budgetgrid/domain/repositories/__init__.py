"""Repository protocol definitions for domain layer."""

from .plan import PlanRepository

__all__ = ["PlanRepository"]
