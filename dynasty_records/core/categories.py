"""Category schema registry.

Every raw statistical category declares its fields once, along with the rule
used whenever two lines for the same player are combined: ``sum`` for counting
stats and ``max`` for "longest single play" fields. The box-score sheets and
the manual stat sheets use different field names, so each field also records
the key it is stored under in either source.
"""
from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .models import coerce_number


class UnknownCategoryError(KeyError):
    """Raised when a category name is not part of the registry."""


class MergeRule(str, Enum):
    SUM = "sum"
    MAX = "max"


@dataclass(frozen=True)
class StatField:
    name: str
    box_key: str | None = None
    manual_key: str | None = None
    rule: MergeRule = MergeRule.SUM


@dataclass(frozen=True)
class FieldRules:
    sum_fields: tuple[str, ...]
    max_fields: tuple[str, ...]


@dataclass(frozen=True)
class CategorySchema:
    name: str
    document_key: str
    fields: tuple[StatField, ...]

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(stat.name for stat in self.fields)

    def rule_for(self, field_name: str) -> MergeRule:
        for stat in self.fields:
            if stat.name == field_name:
                return stat.rule
        return MergeRule.SUM


def _long(name: str, box_key: str | None, manual_key: str | None = "lng") -> StatField:
    return StatField(name, box_key, manual_key, MergeRule.MAX)


def _return_fields(count_key: str) -> tuple[StatField, ...]:
    return (
        StatField("returns", count_key, "ret"),
        StatField("yards", "yards", "yds"),
        StatField("touchdowns", "tD", "td"),
        _long("long", "long"),
    )


CATEGORY_SCHEMAS: dict[str, CategorySchema] = {
    schema.name: schema
    for schema in (
        CategorySchema(
            "passing",
            "passing",
            (
                StatField("completions", "comp", "cmp"),
                StatField("attempts", "attempts", "att"),
                StatField("yards", "yards", "yds"),
                StatField("touchdowns", "tD", "td"),
                StatField("interceptions", "iNT", "int"),
                StatField("sacks", "sacks", "sacks"),
                _long("long", "long"),
            ),
        ),
        CategorySchema(
            "rushing",
            "rushing",
            (
                StatField("carries", "carries", "car"),
                StatField("yards", "yards", "yds"),
                StatField("touchdowns", "tD", "td"),
                StatField("fumbles", "fumbles", "fum"),
                StatField("broken_tackles", "brokenTackles", "bt"),
                StatField("yards_after_contact", "yAC"),
                StatField("runs_20_plus", "20+"),
                _long("long", "long"),
            ),
        ),
        CategorySchema(
            "receiving",
            "receiving",
            (
                StatField("receptions", "receptions", "rec"),
                StatField("yards", "yards", "yds"),
                StatField("touchdowns", "tD", "td"),
                StatField("drops", "drops", "drops"),
                StatField("run_after_catch", "rAC"),
                _long("long", "long"),
            ),
        ),
        CategorySchema(
            "blocking",
            "blocking",
            (
                StatField("sacks_allowed", "sacksAllowed", "sacksAllowed"),
                StatField("pancakes", "pancakes", "pancakes"),
            ),
        ),
        CategorySchema(
            "defense",
            "defense",
            (
                StatField("solo_tackles", "solo", "soloTkl"),
                StatField("assisted_tackles", "assists", "astTkl"),
                StatField("tackles_for_loss", "tFL", "tfl"),
                StatField("sacks", "sack", "sacks"),
                StatField("interceptions", "iNT", "int"),
                StatField("int_return_yards", "iNTYards", "intYds"),
                StatField("deflections", "deflections", "pd"),
                StatField("forced_fumbles", "fF", "ff"),
                StatField("fumble_recoveries", "fR", "fr"),
                StatField("fumble_return_yards", "fumbleYards"),
                StatField("blocks", "blocks"),
                StatField("safeties", "safeties", "sfty"),
                StatField("touchdowns", "tD", "td"),
                _long("int_long", "iNTLong", None),
            ),
        ),
        CategorySchema(
            "kicking",
            "kicking",
            (
                StatField("fg_made", "fGM", "fgm"),
                StatField("fg_attempts", "fGA", "fga"),
                StatField("fg_blocked", "fGBlock"),
                StatField("xp_made", "xPM", "xpm"),
                StatField("xp_attempts", "xPA", "xpa"),
                StatField("xp_blocked", "xPB"),
                StatField("fg_made_0_29", "fGM29"),
                StatField("fg_attempts_0_29", "fGA29"),
                StatField("fg_made_30_39", "fGM39"),
                StatField("fg_attempts_30_39", "fGA39"),
                StatField("fg_made_40_49", "fGM49"),
                StatField("fg_attempts_40_49", "fGA49"),
                StatField("fg_made_50_plus", "fGM50+"),
                StatField("fg_attempts_50_plus", "fGA50+"),
                StatField("kickoffs", "kickoffs"),
                StatField("touchbacks", "touchbacks"),
                _long("fg_long", "fGLong"),
            ),
        ),
        CategorySchema(
            "punting",
            "punting",
            (
                StatField("punts", "punts", "punts"),
                StatField("yards", "yards", "yds"),
                StatField("net_yards", "netYards"),
                StatField("blocked", "block"),
                StatField("inside_20", "in20", "in20"),
                StatField("touchbacks", "tB", "tb"),
                _long("long", "long"),
            ),
        ),
        CategorySchema("kick_return", "kickReturn", _return_fields("kR")),
        CategorySchema("punt_return", "puntReturn", _return_fields("pR")),
    )
}

CATEGORY_ORDER: tuple[str, ...] = tuple(CATEGORY_SCHEMAS)

_BY_DOCUMENT_KEY = {schema.document_key: schema.name for schema in CATEGORY_SCHEMAS.values()}


def get_schema(category: str) -> CategorySchema:
    try:
        return CATEGORY_SCHEMAS[category]
    except KeyError:
        raise UnknownCategoryError(category) from None


def fields_for(category: str) -> FieldRules:
    """Return the summed and maxed field names declared for ``category``."""

    schema = get_schema(category)
    return FieldRules(
        sum_fields=tuple(f.name for f in schema.fields if f.rule is MergeRule.SUM),
        max_fields=tuple(f.name for f in schema.fields if f.rule is MergeRule.MAX),
    )


def category_for_document_key(key: str) -> str | None:
    """Map a document key (``kickReturn``) to its registry name (``kick_return``)."""

    return _BY_DOCUMENT_KEY.get(key)


def empty_totals(category: str) -> dict[str, float]:
    return {name: 0.0 for name in get_schema(category).field_names}


def fold_fields(
    totals: MutableMapping[str, float],
    line: Mapping[str, float],
    category: str,
) -> MutableMapping[str, float]:
    """Merge one canonical line into ``totals`` in place using each field's rule."""

    for stat in get_schema(category).fields:
        value = line.get(stat.name, 0.0)
        current = totals.get(stat.name, 0.0)
        if stat.rule is MergeRule.MAX:
            totals[stat.name] = max(current, value)
        else:
            totals[stat.name] = current + value
    return totals


def _translate(category: str, entry: Mapping[str, Any], *, source: str) -> dict[str, float]:
    schema = get_schema(category)
    result: dict[str, float] = {}
    for stat in schema.fields:
        key = stat.box_key if source == "box_score" else stat.manual_key
        result[stat.name] = coerce_number(entry.get(key)) if key is not None else 0.0
    return result


def translate_box_score(category: str, entry: Mapping[str, Any]) -> dict[str, float]:
    """Convert a box-score line to canonical field names."""

    return _translate(category, entry, source="box_score")


def translate_manual(category: str, entry: Mapping[str, Any]) -> dict[str, float]:
    """Convert a manually entered block to canonical field names."""

    return _translate(category, entry, source="manual")
