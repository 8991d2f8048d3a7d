"""
Idempotent reorganization of dish category links.

Renames one category, makes sure the overflow category exists, then splits the
members of the source category three ways: listed dishes that stay, listed
dishes that move to the target category, and everything else, which moves to
the overflow category. Every link mutation is guarded by an existence check so
a repeated run changes nothing.
"""

from typing import Dict, Iterable, List, Optional, Set, Tuple

from menu_maintenance.core.catalog import default_reorg_plan
from menu_maintenance.core.config import settings
from menu_maintenance.models import Category, Dish
from menu_maintenance.schemas.menu import CategoryRecord, CategoryReorgPlan
from menu_maintenance.schemas.results import ReorgPartition, ReorgResult
from menu_maintenance.services.errors import MenuMaintenanceError, describe_error
from menu_maintenance.services.store import MenuStore
from menu_maintenance.utils.logger import reorg_logger

SECTION = "Category tuning"


def build_name_index(dishes: Iterable[Dish]) -> Dict[str, int]:
    """Map upper-cased dish names to ids; on duplicate names the last dish wins."""
    return {dish.name.upper(): dish.dish_id for dish in dishes}


def resolve_dish_ids(names: Iterable[str], index: Dict[str, int], warnings: List[str]) -> List[int]:
    """Look up each name case-insensitively, warning about (and dropping) unknown ones."""
    ids: List[int] = []
    for name in names:
        dish_id = index.get(name.upper())
        if dish_id is None:
            message = f"Dish not found: {name}"
            reorg_logger.warning(message)
            warnings.append(message)
            continue
        if dish_id not in ids:
            ids.append(dish_id)
    return ids


def partition_members(current: Set[int], keep: Iterable[int], move: Iterable[int]) -> ReorgPartition:
    """
    Split the dishes touched by a reorg.

    `keep` and `move` are returned whole, so listed dishes that are not yet
    linked to the source category still get handled; `overflow` is every
    current member that is in neither list.
    """
    keep_set = frozenset(keep)
    move_set = frozenset(move)
    return ReorgPartition(
        keep=keep_set,
        move=move_set,
        overflow=frozenset(set(current) - keep_set - move_set),
    )


async def resolve_overflow_category(store: MenuStore, name: str, category_type: str) -> Tuple[Category, bool]:
    """Find the category by (name, type) or create it; the flag tells whether it was created."""
    category = await store.categories.find_first({"name": name, "type": category_type})
    if category is not None:
        reorg_logger.info("Found existing category",
                          category=CategoryRecord.model_validate(category).model_dump())
        return category, False

    category = await store.categories.create({"name": name, "type": category_type})
    reorg_logger.info("Created new category",
                      category=CategoryRecord.model_validate(category).model_dump())
    return category, True


async def tune_categories(store: MenuStore, plan: Optional[CategoryReorgPlan] = None) -> ReorgResult:
    """
    Converge category links to the state described by `plan`.

    Args:
        store: Persistence handle for the run
        plan: Reorg configuration (defaults to the VIANDES split)

    Returns:
        ReorgResult; `error` is set if a persistence failure aborted the run
    """
    if plan is None:
        plan = default_reorg_plan(settings.DISH_CATEGORY_TYPE)

    result = ReorgResult()
    source_id = plan.source_category_id
    target_id = plan.target_category_id
    reorg_logger.section_start(SECTION)

    try:
        result.renamed = await store.categories.update_many(
            {"category_id": plan.rename.category_id, "type": plan.category_type},
            {"name": plan.rename.name},
        )
        reorg_logger.info(
            f"Renamed category {plan.rename.category_id} to {plan.rename.name}: {result.renamed}"
        )

        overflow, created = await resolve_overflow_category(
            store, plan.overflow_category_name, plan.category_type
        )
        overflow_id = overflow.category_id
        result.overflow_category_id = overflow_id
        result.overflow_category_created = created

        index = build_name_index(await store.dishes.find_many())
        keep_ids = resolve_dish_ids(plan.keep_names, index, result.warnings)
        move_ids = resolve_dish_ids(plan.move_names, index, result.warnings)

        source_links = await store.dish_categories.find_many({"category_id": source_id})
        current = {link.dish_id for link in source_links}
        partition = partition_members(current, keep_ids, move_ids)

        for dish_id in sorted(partition.overflow):
            result.links_deleted += await store.unlink(source_id, dish_id)
            if await store.ensure_link(overflow_id, dish_id):
                result.links_created += 1
            result.moved_to_overflow.append(dish_id)
        reorg_logger.info(f"Moved from category {source_id} to {plan.overflow_category_name}: "
                          f"{len(result.moved_to_overflow)}")

        for dish_id in sorted(partition.keep):
            if await store.ensure_link(source_id, dish_id):
                result.links_created += 1
            result.kept.append(dish_id)

        for dish_id in sorted(partition.move):
            result.links_deleted += await store.unlink(source_id, dish_id)
            if await store.ensure_link(target_id, dish_id):
                result.links_created += 1
            result.moved_to_target.append(dish_id)
        reorg_logger.info(f"Moved to category {target_id}:", dishes=plan.move_names)

        reorg_logger.success("Category tuning complete.",
                             created=result.links_created, deleted=result.links_deleted)
    except MenuMaintenanceError as e:
        result.error = describe_error(e)
        reorg_logger.error(f"Error tuning categories: {result.error}")

    reorg_logger.section_end(SECTION, success=result.ok)
    return result
