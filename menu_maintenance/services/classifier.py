from typing import Optional, Sequence

from menu_maintenance.core.catalog import DEFAULT_CATEGORY_ID, DEFAULT_CATEGORY_RULES
from menu_maintenance.schemas.menu import KeywordRule


def classify_dish(
    name: str,
    rules: Optional[Sequence[KeywordRule]] = None,
    default_category_id: int = DEFAULT_CATEGORY_ID,
) -> int:
    """
    Pick the category of a dish from its name.

    The name is upper-cased and checked against each rule in order; the first
    rule with a keyword contained in the name decides. Names matching nothing
    get `default_category_id`, so every name yields a category.
    """
    if rules is None:
        rules = DEFAULT_CATEGORY_RULES

    upper_name = name.upper()
    for rule in rules:
        if rule.matches(upper_name):
            return rule.category_id
    return default_category_id
