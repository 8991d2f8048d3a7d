"""
Integration tests for MenuStore and the record services.
"""

import pytest
from decimal import Decimal

from menu_maintenance.core.catalog import VIANDES
from menu_maintenance.db.session import open_menu_store
from menu_maintenance.services.errors import PersistenceError


@pytest.mark.asyncio
async def test_find_with_filters(menu_store, dish_categories):
    found = await menu_store.categories.find_first({"name": "VIANDES", "type": "dish"})
    missing = await menu_store.categories.find_first({"name": "VIANDES", "type": "ingredient"})
    several = await menu_store.categories.find_many({"category_id": [21, 29]}, order_by="-category_id")

    assert found.category_id == VIANDES
    assert missing is None
    assert [c.category_id for c in several] == [29, 21]


@pytest.mark.asyncio
async def test_unknown_filter_field_rejected(menu_store):
    with pytest.raises(ValueError):
        await menu_store.dishes.delete_many({"dish_name": "x"})


@pytest.mark.asyncio
async def test_update_and_delete_return_counts(menu_store, dish_categories):
    updated = await menu_store.categories.update_many({"type": "dish"}, {"type": "menu"})
    deleted = await menu_store.categories.delete_many({"type": "menu"})

    assert updated == 4
    assert deleted == 4
    assert await menu_store.categories.count() == 0


@pytest.mark.asyncio
async def test_ensure_link_is_guarded(menu_store, dish_categories):
    dish = await menu_store.dishes.create({"name": "CHICKEN CUTLET", "price_eur": Decimal("3.32")})

    assert await menu_store.ensure_link(VIANDES, dish.dish_id)
    assert not await menu_store.ensure_link(VIANDES, dish.dish_id)
    assert await menu_store.dish_categories.count({"dish_id": dish.dish_id}) == 1

    assert await menu_store.unlink(VIANDES, dish.dish_id) == 1
    assert not await menu_store.link_exists(VIANDES, dish.dish_id)


@pytest.mark.asyncio
async def test_reset_dish_sequence(menu_store):
    for name in ("A", "B", "C"):
        await menu_store.dishes.create({"name": name, "price_eur": Decimal(1)})
    await menu_store.dishes.delete_many()

    assert await menu_store.reset_dish_sequence()
    dish = await menu_store.dishes.create({"name": "D", "price_eur": Decimal(1)})

    assert dish.dish_id == 1


@pytest.mark.asyncio
async def test_database_errors_are_wrapped(menu_store):
    with pytest.raises(PersistenceError) as exc_info:
        await menu_store.execute_raw("SELECT * FROM no_such_table")

    assert exc_info.value.original_error is not None
    # the session is usable again after the failure
    assert await menu_store.dishes.count() == 0


@pytest.mark.asyncio
async def test_store_scope_logs_session_lifecycle(async_engine, capsys):
    async with open_menu_store(engine=async_engine):
        opened = capsys.readouterr().out

    assert "Database session opened" in opened
    assert "Database connection released" in capsys.readouterr().out
