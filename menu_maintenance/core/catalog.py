"""
Fixed menu data used by the maintenance scripts.

Holds the replacement catalog (prices in rupees), the dish category ids of the
production database, the ordered keyword rules used to classify new dishes
and the plan for the one-off category reorganization.
"""

from decimal import Decimal
from typing import List

from menu_maintenance.schemas.menu import CategoryRename, CategoryReorgPlan, KeywordRule, MenuItem

# Dish category ids
FINGER_FOOD = 21
BURGERS = 25  # "BURGERS avec FRITES MAISON", renamed by the reorg
VIANDES = 27
KIDS_MENU = 29

DEFAULT_CATEGORY_ID = VIANDES

# Checked in order; the first rule with a matching keyword wins
DEFAULT_CATEGORY_RULES: List[KeywordRule] = [
    KeywordRule(keywords=("KIDS",), category_id=KIDS_MENU),
    KeywordRule(keywords=("PIZZA",), category_id=BURGERS),
    KeywordRule(keywords=("RISSOTO",), category_id=VIANDES),
    KeywordRule(keywords=("CHICKEN",), category_id=VIANDES),
    KeywordRule(keywords=("MOMO",), category_id=FINGER_FOOD),
    KeywordRule(keywords=("SUSHI",), category_id=FINGER_FOOD),
    KeywordRule(keywords=("FETTUCINI", "SPEGHETI", "PENNE"), category_id=VIANDES),
    KeywordRule(keywords=("NOODLES",), category_id=VIANDES),
    KeywordRule(keywords=("BURGER",), category_id=BURGERS),
    KeywordRule(keywords=("KABAB",), category_id=FINGER_FOOD),
    KeywordRule(keywords=("CHILLY",), category_id=VIANDES),
]


def _items(*rows) -> List[MenuItem]:
    return [MenuItem(name=name, price=Decimal(price)) for name, price in rows]


NEW_MENU_ITEMS: List[MenuItem] = _items(
    ("AL FUNGI RISSOTO", 699),
    ("KOREAN BBQ CHICKEN", 499),
    ("Kids noodles veg", 349),
    ("CURRY WALA MOMO", 399),
    ("ASPARAGUS CHEESE SUSHI", 549),
    ("CHICKEN CUTLET", 299),
    ("Drums of Seven", 469),
    ("PRAWN KATSU SUSHI", 589),
    ("AVACADO CREAM CHEESE SUSHI", 599),
    ("PANEER MAKHANI PIZZA LARGE", 699),
    ("FETTUCINI IN MUSHROOM TRUFFLE SAUCE", 599),
    ("SPEGHETI BOLOGNESE", 699),
    ("ARRABIATA PENNE CHICKEN", 549),
    ("ARRABIATA PENNE VEG", 499),
    ("PENNE AL COSIO", 519),
    ("UDON NOODLES CHICKEN BOWL (COMBO)", 419),
    ("RAMEN DRY VEG", 449),
    ("BUCKWHEAT NOODLES (VEG)", 429),
    ("RAMEN DRY CHICKEN", 489),
    ("UDON NOODLES WITH FIVE SPICE PANEER BOWL (COMBO)", 389),
    ("AVACADO BURRATA OPE EYE TOAST (SANDWICH)", 399),  # estimated price
    ("OPEN VEG BURGER", 299),
    ("SEAFOOD CHARCOAL FETTUCCINE", 689),
    ("CHICKEN SEEKH KABAB", 449),
    ("PANEER TIKKA KABAB", 489),
    ("CLASSIC MARGHERITA PIZZA", 649),
    ("ALL FUNGI PIZZA", 549),
    ("CORN MARGHERITA PIZZA", 649),
    ("SPICY COTTAGE CHEESE PIZZA", 549),
    ("CRAZY CHILLY CHICKEN DRY", 499),
    ("FISH CHILLY DRY (BASA FISH)", 539),
    ("BBQ CHICKEN PIZZA", 699),
    ("BABY CORN CHILLY DRY", 369),
    ("PANEER CHILLY DRY", 419),
)


def default_reorg_plan(category_type: str = "dish") -> CategoryReorgPlan:
    """Plan splitting VIANDES into meats, kids dishes and pasta/sandwiches."""
    return CategoryReorgPlan(
        rename=CategoryRename(category_id=BURGERS, name="Burgers and Pizzas"),
        category_type=category_type,
        overflow_category_name="Pasta/Sandwiches",
        source_category_id=VIANDES,
        target_category_id=KIDS_MENU,
        keep_names=[
            "KOREAN BBQ CHICKEN",
            "CHICKEN CUTLET",
            "DRUMS OF SEVEN",
            "CHICKEN SEEKH KABAB",
            "FISH CHILLY DRY (BASA FISH)",
            "CRAZY CHILLY CHICKEN DRY",
        ],
        move_names=[
            "BABY CORN CHILLY DRY",
            "PANEER CHILLY DRY",
        ],
    )
