"""JSON file storage for the investment collection.

Loading never fails: a missing file is an empty collection and unreadable or
malformed data is logged and treated the same way. Saving is best effort.
"""

from __future__ import annotations

from decimal import InvalidOperation
from pathlib import Path
import json
import logging
import os
from typing import Iterable, List

from investment import Investment

logger = logging.getLogger(__name__)

DATA_FILE = Path(
    os.environ.get("FIN_DATA_FILE", Path(__file__).with_name("investments_data.json"))
)


def load(path: Path | str = DATA_FILE) -> List[Investment]:
    """Load investments from ``path``."""

    path = Path(path)
    if not path.exists():
        return []
    try:
        with path.open() as f:
            data = json.load(f)
        return [Investment.from_dict(item) for item in data]
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Error loading investments from %s: %s", path, exc)
    except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
        logger.error("Malformed investment data in %s: %s", path, exc)
    return []


def save(investments: Iterable[Investment], path: Path | str = DATA_FILE) -> bool:
    """Write ``investments`` to ``path``; return ``False`` if that failed."""

    path = Path(path)
    records = [inv.to_dict() for inv in investments]
    try:
        with path.open("w") as f:
            json.dump(records, f, indent=2)
    except OSError as exc:
        logger.error("Error saving investments to %s: %s", path, exc)
        return False
    logger.info("Saved %d investments to %s", len(records), path)
    return True
