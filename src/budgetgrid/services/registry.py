"""Category registry for the budget grid."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Iterable, Iterator

from ..constants.categories import DEFAULT_CATEGORIES, Bucket
from ..logging_config import get_logger

logger = get_logger("registry")


@dataclass(frozen=True, slots=True)
class Category:
    """A named grid row belonging to one bucket."""

    id: str
    name: str
    bucket: Bucket


def default_categories() -> list[Category]:
    """Return fresh Category objects for the built-in set."""

    return [Category(id=cid, name=name, bucket=bucket) for cid, name, bucket in DEFAULT_CATEGORIES]


def _new_category_id() -> str:
    return f"custom-{uuid.uuid4().hex}"


class CategoryRegistry:
    """Ordered set of category definitions.

    Unknown ids are ignored by ``rename``/``remove``; blank names are ignored
    by ``add`` and ``rename``. Removing a category does not touch stored
    amounts for its id.
    """

    def __init__(self, categories: Iterable[Category] | None = None) -> None:
        source = default_categories() if categories is None else categories
        self._categories: dict[str, Category] = {}
        for category in source:
            self._categories[category.id] = category

    def add(self, bucket: Bucket | str, name: str) -> Category | None:
        cleaned = (name or "").strip()
        if not cleaned:
            logger.debug("Ignoring add of blank category name")
            return None
        category = Category(id=_new_category_id(), name=cleaned, bucket=Bucket.parse(bucket))
        self._categories[category.id] = category
        logger.info("Category added", extra={"category_id": category.id, "bucket": category.bucket.value})
        return category

    def rename(self, category_id: str, new_name: str) -> None:
        current = self._categories.get(category_id)
        cleaned = (new_name or "").strip()
        if current is None or not cleaned:
            return
        self._categories[category_id] = replace(current, name=cleaned)
        logger.info("Category renamed", extra={"category_id": category_id})

    def remove(self, category_id: str) -> None:
        if self._categories.pop(category_id, None) is not None:
            logger.info("Category removed", extra={"category_id": category_id})

    def get(self, category_id: str) -> Category | None:
        return self._categories.get(category_id)

    def find_by_name(self, name: str) -> Category | None:
        """Case-insensitive exact match on display name."""

        wanted = name.lower()
        for category in self._categories.values():
            if category.name.lower() == wanted:
                return category
        return None

    def list_by_bucket(self, bucket: Bucket | str) -> list[Category]:
        wanted = Bucket.parse(bucket)
        return [c for c in self._categories.values() if c.bucket is wanted]

    def ids(self) -> list[str]:
        return list(self._categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(list(self._categories.values()))

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._categories


__all__ = ["Category", "CategoryRegistry", "default_categories"]
