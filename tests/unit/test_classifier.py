"""
Unit tests for the dish name classifier.

Covers single-keyword names, names with keywords from several priority tiers,
case handling and the default category.
"""

import pytest

from menu_maintenance.core.catalog import (
    BURGERS,
    DEFAULT_CATEGORY_ID,
    DEFAULT_CATEGORY_RULES,
    FINGER_FOOD,
    KIDS_MENU,
    VIANDES,
)
from menu_maintenance.schemas.menu import KeywordRule
from menu_maintenance.services.classifier import classify_dish


class TestClassifyDish:
    """Test classify_dish with the default rule table."""

    @pytest.mark.parametrize("name, expected", [
        ("KIDS PLATTER", KIDS_MENU),
        ("CLASSIC MARGHERITA PIZZA", BURGERS),
        ("AL FUNGI RISSOTO", VIANDES),
        ("KOREAN BBQ CHICKEN", VIANDES),
        ("CURRY WALA MOMO", FINGER_FOOD),
        ("PRAWN KATSU SUSHI", FINGER_FOOD),
        ("FETTUCINI IN MUSHROOM TRUFFLE SAUCE", VIANDES),
        ("SPEGHETI BOLOGNESE", VIANDES),
        ("PENNE AL COSIO", VIANDES),
        ("BUCKWHEAT NOODLES (VEG)", VIANDES),
        ("OPEN VEG BURGER", BURGERS),
        ("PANEER TIKKA KABAB", FINGER_FOOD),
        ("BABY CORN CHILLY DRY", VIANDES),
    ])
    def test_single_keyword(self, name, expected):
        assert classify_dish(name) == expected

    def test_no_keyword_uses_default(self):
        assert classify_dish("Drums of Seven") == DEFAULT_CATEGORY_ID
        assert classify_dish("") == DEFAULT_CATEGORY_ID

    def test_custom_default(self):
        assert classify_dish("RAMEN DRY VEG", default_category_id=99) == 99

    def test_case_insensitive(self):
        assert classify_dish("Kids noodles veg") == KIDS_MENU
        assert classify_dish("bbq chicken pizza") == BURGERS

    @pytest.mark.parametrize("name, expected", [
        # KIDS beats PIZZA
        ("KIDS PIZZA", KIDS_MENU),
        # PIZZA beats CHICKEN
        ("BBQ CHICKEN PIZZA", BURGERS),
        # CHICKEN beats KABAB
        ("CHICKEN SEEKH KABAB", VIANDES),
        # MOMO beats NOODLES
        ("MOMO NOODLES", FINGER_FOOD),
        # PENNE beats BURGER
        ("PENNE BURGER", VIANDES),
        # KABAB beats CHILLY
        ("CHILLY KABAB", FINGER_FOOD),
    ])
    def test_higher_priority_keyword_wins(self, name, expected):
        assert classify_dish(name) == expected

    def test_fettuccine_spelling_is_not_a_pasta_keyword(self):
        # Only the FETTUCINI spelling is listed
        assert classify_dish("SEAFOOD CHARCOAL FETTUCCINE") == DEFAULT_CATEGORY_ID


class TestCustomRules:
    """Test classify_dish with caller-provided rules."""

    def test_rules_are_checked_in_order(self):
        rules = [
            KeywordRule(keywords=("veg",), category_id=1),
            KeywordRule(keywords=("burger",), category_id=2),
        ]
        assert classify_dish("OPEN VEG BURGER", rules) == 1
        assert classify_dish("OPEN VEG BURGER", list(reversed(rules))) == 2

    def test_keywords_are_upper_cased(self):
        rule = KeywordRule(keywords=("sushi", "Maki"), category_id=5)
        assert rule.keywords == ("SUSHI", "MAKI")
        assert classify_dish("salmon maki", [rule]) == 5

    def test_empty_rules_always_default(self):
        assert classify_dish("KIDS PIZZA", [], default_category_id=7) == 7

    def test_default_rule_table_order(self):
        first_keywords = [rule.keywords[0] for rule in DEFAULT_CATEGORY_RULES]
        assert first_keywords == [
            "KIDS", "PIZZA", "RISSOTO", "CHICKEN", "MOMO", "SUSHI",
            "FETTUCINI", "NOODLES", "BURGER", "KABAB", "CHILLY",
        ]
