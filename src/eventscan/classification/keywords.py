"""Checked-in keyword and marker tables.

Guidelines for adding free-food keywords:
- Be specific to avoid false positives
- Include common variations and misspellings
- Add to the tier that matches how reliable the phrase is
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class KeywordConfidence(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    BROAD = "BROAD"


# Explicit "free" phrases
_HIGH_CONFIDENCE = (
    "free food",
    "free pizza",
    "free lunch",
    "free dinner",
    "free breakfast",
    "free snacks",
    "free refreshments",
    "free drinks",
    "free beverages",
    "free coffee",
    "free tea",
    "free boba",
    "free bubble tea",
    # specific free items
    "free cookies",
    "free dessert",
    "free ice cream",
    "free gelato",
    "free pastries",
    "free donuts",
    "free bagels",
    "free cupcakes",
    "free brownies",
    # free meals
    "free sandwiches",
    "free subs",
    "free burritos",
    "free tacos",
    "free wings",
    "free bbq",
    "free ramen",
    "free sushi",
)

# "Provided/served" phrasing, complimentary and catering
_MEDIUM_CONFIDENCE = (
    "food provided",
    "snacks provided",
    "drinks provided",
    "refreshments provided",
    "meal provided",
    "lunch provided",
    "dinner provided",
    "breakfast provided",
    "pizza provided",
    "food will be served",
    "refreshments will be served",
    "snacks will be served",
    "drinks will be served",
    "complimentary food",
    "complimentary meal",
    "complimentary refreshments",
    "complimentary snacks",
    "catering provided",
    "catered event",
)

# Light food terms
_LOW_CONFIDENCE = (
    "light refreshments",
    "appetizers provided",
    "hors d'oeuvres",
)

# Known false-positive sources ("food drive", "drinks for purchase", ...).
_BROAD = (
    "treats",
    "bites",
    "munchies",
    "food",
    "snacks",
    "drinks",
)

FREE_FOOD_KEYWORDS: tuple[str, ...] = _HIGH_CONFIDENCE + _MEDIUM_CONFIDENCE + _LOW_CONFIDENCE + _BROAD

FREE_FOOD_KEYWORD_CONFIDENCE: Mapping[str, KeywordConfidence] = MappingProxyType(
    {
        **{k: KeywordConfidence.HIGH for k in _HIGH_CONFIDENCE},
        **{k: KeywordConfidence.MEDIUM for k in _MEDIUM_CONFIDENCE},
        **{k: KeywordConfidence.LOW for k in _LOW_CONFIDENCE},
        **{k: KeywordConfidence.BROAD for k in _BROAD},
    }
)

HOUSING_ONLY_MARKERS: tuple[str, ...] = (
    "This event is open to USC Housing Residents only. Residential Education operates its "
    "programs in accordance with USC's Notice of Non-Discrimination.",
    "usc housing residents",
    "housing residents only",
)

# Standalone "RA"/"RAs"; must not fire inside "grass" or "drama".
RA_WORD_PATTERN = r"\bras?\b"

HOUSING_CATEGORIES: tuple[str, ...] = (
    "RA Floor Program",
    "Res College Cup",
    "Residential College or Community Event",
)
