"""Reconcile free-text player names to stable roster pids."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
import logging
from typing import Any

from ..core.models import PlayerRecord, normalize_name

logger = logging.getLogger(__name__)


class PlayerIndex:
    """Name and pid lookup over a roster.

    Names are only used to attach a pid to records that arrive without one.
    A name shared by more than one roster player is ambiguous and never
    resolves, so those records must carry an explicit pid.
    """

    def __init__(self, players: Iterable[PlayerRecord]) -> None:
        self._pids: set[str] = set()
        self._by_name: dict[str, list[str]] = defaultdict(list)
        for player in players:
            self._pids.add(player.pid)
            key = normalize_name(player.name)
            if key and player.pid not in self._by_name[key]:
                self._by_name[key].append(player.pid)

    def resolve(self, name: Any, pid: Any = None) -> str | None:
        """Return the roster pid for a record, or ``None`` when it cannot be matched."""

        if pid is not None and str(pid).strip():
            key = str(pid).strip()
            if key in self._pids:
                return key
            logger.debug("Ignoring unknown pid %s for '%s'", key, name)
        candidates = self._by_name.get(normalize_name(name), [])
        if len(candidates) == 1:
            return candidates[0]
        if len(candidates) > 1:
            logger.debug("Name '%s' matches %s roster players; skipping", name, len(candidates))
        return None
