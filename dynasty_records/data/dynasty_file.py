"""Read dynasty documents exported to JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..core.models import DynastyDocument

logger = logging.getLogger(__name__)


class DynastyFileError(RuntimeError):
    """Raised when a dynasty export cannot be read."""


def load_dynasty(path: str | Path) -> DynastyDocument:
    """Load a dynasty export, unwrapping an optional top-level ``dynasty`` key."""

    path = Path(path)
    if not path.exists():
        raise DynastyFileError(f"Dynasty file not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DynastyFileError(f"Invalid JSON in {path}: {exc}") from exc

    if isinstance(payload, dict) and isinstance(payload.get("dynasty"), dict):
        payload = payload["dynasty"]
    if not isinstance(payload, dict):
        raise DynastyFileError(f"Expected a JSON object in {path}")

    document = DynastyDocument.from_dict(payload)
    logger.info(
        "Loaded dynasty from %s (%s games, %s players)",
        path,
        len(document.games),
        len(document.players),
    )
    return document
