"""Core domain models and the category registry."""

from .categories import (
    CATEGORY_ORDER,
    CATEGORY_SCHEMAS,
    CategorySchema,
    FieldRules,
    MergeRule,
    StatField,
    UnknownCategoryError,
    fields_for,
    get_schema,
)
from .models import (
    DisplayMode,
    DynastyDocument,
    GameRecord,
    LeaderboardEntry,
    PlayerNotFoundError,
    PlayerRecord,
    SeasonAggregate,
    coerce_number,
    normalize_name,
)

__all__ = [
    "CATEGORY_ORDER",
    "CATEGORY_SCHEMAS",
    "CategorySchema",
    "FieldRules",
    "MergeRule",
    "StatField",
    "UnknownCategoryError",
    "fields_for",
    "get_schema",
    "DisplayMode",
    "DynastyDocument",
    "GameRecord",
    "LeaderboardEntry",
    "PlayerNotFoundError",
    "PlayerRecord",
    "SeasonAggregate",
    "coerce_number",
    "normalize_name",
]
