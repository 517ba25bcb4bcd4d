import json
import logging
from pathlib import Path
from typing import List, Optional

from roomrates.domain.RoomTemplate import RoomTemplate
from roomrates.utilities.config import ROOMS_SEED_FILE

logger = logging.getLogger(__name__)


def load_room_templates(path: Optional[Path] = None) -> List[RoomTemplate]:
    """Read the seed room types from JSON. Returns an empty list if the file is unreadable."""
    source = Path(path) if path is not None else ROOMS_SEED_FILE
    try:
        with open(source, "r", encoding="utf-8") as f:
            data = json.load(f) or []
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Error reading room templates from %s: %s", source, e)
        return []
    return [RoomTemplate.from_dict(room) for room in data]
