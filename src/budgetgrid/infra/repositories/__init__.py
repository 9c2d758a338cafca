"""Concrete repository implementations using SQLModel."""

from .plan import SQLModelPlanRepository

__all__ = ["SQLModelPlanRepository"]
