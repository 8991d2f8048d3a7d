"""
Full replacement of the dish catalog.

Wipes every dish together with the join tables that reference dishes, restarts
the dish id sequence, then inserts the new catalog in order and links each
dish to the category picked by the name classifier.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Sequence, Union

from menu_maintenance.core.catalog import DEFAULT_CATEGORY_ID, NEW_MENU_ITEMS
from menu_maintenance.core.config import settings
from menu_maintenance.schemas.menu import KeywordRule, MenuItem
from menu_maintenance.schemas.results import AddedDish, ReplacementResult
from menu_maintenance.services.classifier import classify_dish
from menu_maintenance.services.errors import ConfigurationError, MenuMaintenanceError, describe_error
from menu_maintenance.services.store import MenuStore
from menu_maintenance.utils.logger import menu_logger

SECTION = "Menu replacement"


def convert_price(price: Union[Decimal, int, float], exchange_rate: Union[Decimal, int, float]) -> Decimal:
    """Convert a source-currency price with a rate given as source units per target unit."""
    rate = Decimal(str(exchange_rate))
    if rate <= 0:
        raise ConfigurationError(f"Exchange rate must be positive, got {exchange_rate}")
    return Decimal(str(price)) / rate


async def clear_catalog(store: MenuStore) -> None:
    """Delete all dishes, dependents first, and restart dish ids at 1."""
    menu_logger.info("Clearing existing dish-ingredient relationships...")
    await store.dish_ingredients.delete_many()

    menu_logger.info("Clearing existing dish-cuisson relationships...")
    await store.dish_cuissons.delete_many()

    menu_logger.info("Clearing existing dish-category relationships...")
    await store.dish_categories.delete_many()

    menu_logger.info("Clearing existing dishes...")
    deleted = await store.dishes.delete_many()
    menu_logger.debug("Dishes removed", count=deleted)

    if not await store.reset_dish_sequence():
        menu_logger.warning("Dish id sequence was not reset", dialect=store.dialect_name)


async def replace_menu(
    store: MenuStore,
    items: Optional[Sequence[MenuItem]] = None,
    rules: Optional[Sequence[KeywordRule]] = None,
    exchange_rate: Optional[Union[Decimal, float]] = None,
    default_category_id: int = DEFAULT_CATEGORY_ID,
) -> ReplacementResult:
    """
    Replace the dish catalog with `items`.

    Args:
        store: Persistence handle for the run
        items: New catalog, prices in the source currency (defaults to NEW_MENU_ITEMS)
        rules: Ordered keyword rules for the classifier
        exchange_rate: Source units per euro (defaults to settings.INR_TO_EUR_RATE)
        default_category_id: Category for names no rule matches

    Returns:
        ReplacementResult; `error` is set if a persistence failure aborted the run
    """
    if items is None:
        items = NEW_MENU_ITEMS
    if exchange_rate is None:
        exchange_rate = settings.INR_TO_EUR_RATE

    result = ReplacementResult()
    menu_logger.section_start(SECTION)

    try:
        # Fail on a bad rate before anything is deleted
        convert_price(0, exchange_rate)

        await clear_catalog(store)

        menu_logger.info("Inserting new menu items...")
        for item in items:
            if item.price == 0:
                menu_logger.info(f"Skipping {item.name} - no price provided")
                result.skipped += 1
                continue

            price_eur = convert_price(item.price, exchange_rate)
            dish = await store.dishes.create({
                "name": item.name,
                "price_eur": price_eur,
                "record_date": datetime.now(timezone.utc),
            })

            category_id = classify_dish(item.name, rules, default_category_id)
            await store.dish_categories.create({"category_id": category_id, "dish_id": dish.dish_id})

            result.inserted += 1
            result.dishes.append(AddedDish(
                dish_id=dish.dish_id,
                name=item.name,
                price_eur=price_eur,
                category_id=category_id,
            ))
            menu_logger.info(
                f"Added: {item.name} - {item.price} rupees ({price_eur:.2f} EUR) - Category: {category_id}"
            )

        menu_logger.success("Menu replacement completed successfully!",
                            inserted=result.inserted, skipped=result.skipped)
    except MenuMaintenanceError as e:
        result.error = describe_error(e)
        menu_logger.error(f"Error replacing menu: {result.error}",
                          inserted=result.inserted, skipped=result.skipped)

    menu_logger.section_end(SECTION, success=result.ok)
    return result
