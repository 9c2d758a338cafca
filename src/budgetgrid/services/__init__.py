"""Service module exports."""

from . import (
    columns,
    export_csv,
    formatting,
    history,
    metrics,
    plan_io,
    projector,
    registry,
    reports,
    resolver,
    session,
    store,
)

__all__ = [
    "columns",
    "export_csv",
    "formatting",
    "history",
    "metrics",
    "plan_io",
    "projector",
    "registry",
    "reports",
    "resolver",
    "session",
    "store",
]
