from __future__ import annotations

from eventscan.classification.classifier import (
    ClassifierRules,
    EventClassifier,
    has_free_food,
    is_housing_category,
    is_housing_only,
    matched_keywords,
)
from eventscan.classification.keywords import FREE_FOOD_KEYWORD_CONFIDENCE, FREE_FOOD_KEYWORDS, KeywordConfidence


def test_free_food_match_reports_keywords() -> None:
    text = "Come hang out! Free Pizza will be served."
    assert has_free_food(text) is True
    assert "free pizza" in matched_keywords(text)


def test_matched_keywords_follow_table_order() -> None:
    assert matched_keywords("free pizza and snacks") == ("free pizza", "snacks")


def test_no_free_food() -> None:
    assert has_free_food("Career panel with alumni") is False
    assert matched_keywords("Career panel with alumni") == ()


def test_broad_keywords_are_flagged_as_broad() -> None:
    assert FREE_FOOD_KEYWORDS[-1] == "drinks"
    assert FREE_FOOD_KEYWORD_CONFIDENCE["food"] is KeywordConfidence.BROAD
    assert FREE_FOOD_KEYWORD_CONFIDENCE["free pizza"] is KeywordConfidence.HIGH
    # Broad words still count as evidence.
    assert has_free_food("Canned food drive") is True


def test_housing_ra_word_boundary() -> None:
    assert is_housing_only("Please bring your RA to the lawn") is True
    assert is_housing_only("Meet your RAs tonight") is True
    assert is_housing_only("the grass is green") is False
    assert is_housing_only("Drama club rehearsal") is False


def test_housing_marker_phrases_are_case_insensitive() -> None:
    assert is_housing_only("Open to usc HOUSING residents living on campus") is True
    assert is_housing_only("For housing residents only!") is True


def test_housing_category_is_case_sensitive() -> None:
    assert is_housing_only("Open mic", "Social / RA Floor Program") is True
    assert is_housing_category("Res College Cup") is True
    assert is_housing_category("res college cup") is False
    assert is_housing_category("") is False
    assert is_housing_category(None) is False


def test_classifiers_are_total() -> None:
    for value in ("", None, 42):
        assert has_free_food(value) is False
        assert matched_keywords(value) == ()
        assert is_housing_only(value) is False


def test_injected_rules_replace_defaults() -> None:
    classifier = EventClassifier(
        ClassifierRules(
            free_food_keywords=("Cake",),
            housing_markers=("dorm only",),
            housing_categories=("Hall Event",),
        )
    )
    result = classifier.classify("Birthday CAKE in the lounge, DORM ONLY", "Hall Event")
    assert result.has_free_food is True
    assert result.matched_keywords == ("Cake",)
    assert result.is_housing_only is True
    assert classifier.has_free_food("free pizza") is False
