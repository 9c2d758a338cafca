"""Category registry tests."""

from __future__ import annotations

from budgetgrid.constants.categories import Bucket
from budgetgrid.services.registry import Category, CategoryRegistry


def test_default_registry_covers_every_bucket():
    registry = CategoryRegistry()

    assert len(registry) == 22
    assert [c.id for c in registry.list_by_bucket(Bucket.INCOME)] == ["salary", "freelance", "extra"]
    assert len(registry.list_by_bucket(Bucket.FUTURE)) == 7
    assert len(registry.list_by_bucket(Bucket.LIVING)) == 6
    assert len(registry.list_by_bucket("present")) == 6


def test_add_generates_unique_ids_and_strips_names():
    registry = CategoryRegistry([])

    first = registry.add(Bucket.PRESENT, "  Concerts ")
    second = registry.add(Bucket.PRESENT, "Concerts")

    assert first is not None and second is not None
    assert first.name == "Concerts"
    assert first.id.startswith("custom-")
    assert first.id != second.id
    assert [c.id for c in registry] == [first.id, second.id]


def test_add_ignores_blank_names():
    registry = CategoryRegistry([])

    assert registry.add(Bucket.LIVING, "") is None
    assert registry.add(Bucket.LIVING, "   ") is None
    assert len(registry) == 0


def test_rename_changes_display_name_only():
    registry = CategoryRegistry()

    registry.rename("housing", "Rent & Mortgage")

    renamed = registry.get("housing")
    assert renamed == Category(id="housing", name="Rent & Mortgage", bucket=Bucket.LIVING)


def test_rename_and_remove_unknown_ids_are_noops():
    registry = CategoryRegistry()
    before = list(registry)

    registry.rename("does-not-exist", "Anything")
    registry.remove("does-not-exist")

    assert list(registry) == before


def test_rename_ignores_blank_name():
    registry = CategoryRegistry()

    registry.rename("food", "  ")

    assert registry.get("food").name == "🍽️ Food"


def test_remove_drops_definition():
    registry = CategoryRegistry()

    registry.remove("travel")

    assert registry.get("travel") is None
    assert "travel" not in registry
    assert all(c.id != "travel" for c in registry.list_by_bucket(Bucket.PRESENT))


def test_find_by_name_is_case_insensitive_exact_match():
    registry = CategoryRegistry()

    assert registry.find_by_name("main income / salary").id == "salary"
    assert registry.find_by_name("🏠 HOUSING").id == "housing"
    assert registry.find_by_name("Housing") is None
