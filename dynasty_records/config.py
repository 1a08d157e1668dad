"""Leaderboard configuration: qualification thresholds and leaderboard size."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
from typing import Any

from .core.models import DisplayMode
from .stats_engine import STAT_CATEGORIES, StatDefinition, UnknownStatError, get_stat_definition

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 10


class ConfigError(ValueError):
    """Raised when a leaderboard configuration is invalid."""


@dataclass(frozen=True)
class StatThreshold:
    """Per-stat overrides. ``None`` keeps the built-in value."""

    season_min: float | None = None
    career_min: float | None = None
    top_n: int | None = None


@dataclass
class LeaderboardConfig:
    top_n: int = DEFAULT_TOP_N
    thresholds: dict[str, StatThreshold] = field(default_factory=dict)
    remax_long_fields: bool = False

    def __post_init__(self) -> None:
        if self.top_n < 1:
            raise ConfigError(f"top_n must be positive, got {self.top_n}")
        for key, threshold in self.thresholds.items():
            category, stat = _split_key(key)
            has_minimum = threshold.season_min is not None or threshold.career_min is not None
            if has_minimum and (
                (stat.min_att is None and stat.min_yds is None)
                or STAT_CATEGORIES[category].volume_column(stat) is None
            ):
                raise ConfigError(f"'{key}' is not a rate stat; only top_n can be overridden")
            for name in ("season_min", "career_min", "top_n"):
                value = getattr(threshold, name)
                if value is not None and value < 0:
                    raise ConfigError(f"{key}.{name} must not be negative, got {value}")
            if threshold.top_n == 0:
                raise ConfigError(f"{key}.top_n must be positive")

    def threshold_for(
        self, category: str, stat: StatDefinition, mode: DisplayMode | str
    ) -> float | None:
        """Minimum volume for ``stat`` in the given display mode, or ``None``."""

        career = DisplayMode.parse(mode) is DisplayMode.CAREER
        base = stat.min_att or stat.min_yds
        default = None
        if base is not None:
            default = base.career if career else base.season

        override = self.thresholds.get(f"{category}.{stat.key}")
        if override is None:
            return default
        value = override.career_min if career else override.season_min
        return default if value is None else value

    def top_n_for(self, category: str, stat: StatDefinition) -> int:
        override = self.thresholds.get(f"{category}.{stat.key}")
        if override is not None and override.top_n is not None:
            return override.top_n
        return self.top_n

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "LeaderboardConfig":
        thresholds: dict[str, StatThreshold] = {}
        raw = payload.get("thresholds") or {}
        if not isinstance(raw, Mapping):
            raise ConfigError("'thresholds' must be an object")
        for key, value in raw.items():
            if not isinstance(value, Mapping):
                raise ConfigError(f"Threshold for '{key}' must be an object")
            try:
                thresholds[str(key)] = StatThreshold(
                    season_min=_optional_number(value.get("season_min")),
                    career_min=_optional_number(value.get("career_min")),
                    top_n=_optional_int(value.get("top_n")),
                )
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid threshold for '{key}': {exc}") from exc
        try:
            top_n = int(payload.get("top_n", DEFAULT_TOP_N))
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid top_n: {exc}") from exc
        return cls(
            top_n=top_n,
            thresholds=thresholds,
            remax_long_fields=bool(payload.get("remax_long_fields", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "top_n": self.top_n,
            "remax_long_fields": self.remax_long_fields,
            "thresholds": {
                key: {
                    name: getattr(threshold, name)
                    for name in ("season_min", "career_min", "top_n")
                    if getattr(threshold, name) is not None
                }
                for key, threshold in sorted(self.thresholds.items())
            },
        }

    @classmethod
    def load(cls, path: Path) -> "LeaderboardConfig":
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Could not read leaderboard config {path}: {exc}") from exc
        if not isinstance(data, Mapping):
            raise ConfigError(f"Leaderboard config {path} must be a JSON object")
        config = cls.from_dict(data)
        logger.info("Loaded leaderboard config from %s (%s overrides)", path, len(config.thresholds))
        return config

    def save(self, path: Path) -> None:
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")


def _split_key(key: str) -> tuple[str, StatDefinition]:
    category, _, stat_key = key.partition(".")
    try:
        return category, get_stat_definition(category, stat_key)
    except UnknownStatError as exc:
        raise ConfigError(f"Unknown stat key '{key}': {exc}") from exc


def _optional_number(value: Any) -> float | None:
    if value is None:
        return None
    return float(value)


def _optional_int(value: Any) -> int | None:
    if value is None:
        return None
    return int(value)
