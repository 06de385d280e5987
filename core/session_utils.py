# core/session_utils.py
from __future__ import annotations
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import List, Optional, Sequence

import pandas as pd

from core.config import CLASS_ORDER, HISTORY_LIMIT, LENGTH_PRESETS
from core.errors import UnknownPresetError
from core.password_utils import CharacterClassSelection

# =========================
# Preset độ dài
# =========================
def preset_length(name: str) -> int:
    try:
        return LENGTH_PRESETS[name]
    except KeyError:
        raise UnknownPresetError(name) from None


def toggle_option(selection: CharacterClassSelection, key: str) -> CharacterClassSelection:
    """
    Flip one character class. Turning off the last enabled class is refused
    and the selection comes back unchanged.
    """
    if key not in CLASS_ORDER:
        raise ValueError(f"Unknown character class: {key}")
    toggled = replace(selection, **{key: not getattr(selection, key)})
    if not toggled.any_enabled():
        return selection
    return toggled


# =========================
# Lịch sử (do caller giữ)
# =========================
@dataclass(frozen=True)
class HistoryEntry:
    password: str
    timestamp: datetime
    id: str


def push_history(
    history: Sequence[HistoryEntry],
    password: str,
    *,
    limit: int = HISTORY_LIMIT,
    now: Optional[datetime] = None,
) -> List[HistoryEntry]:
    """Return a new history with `password` first, capped at `limit` entries."""
    entry = HistoryEntry(password=password, timestamp=now or datetime.now(), id=str(uuid.uuid4()))
    return [entry, *history][:limit]


def clear_history() -> List[HistoryEntry]:
    return []


MASK_CHAR = "•"


def mask_password(password: str) -> str:
    return MASK_CHAR * len(password)


def history_frame(history: Sequence[HistoryEntry]) -> pd.DataFrame:
    """One row per entry, newest first; `Masked` is what the table shows by default."""
    rows = [
        {
            "#": i,
            "Password": h.password,
            "Masked": mask_password(h.password),
            "Generated at": h.timestamp.strftime("%H:%M:%S"),
        }
        for i, h in enumerate(history, start=1)
    ]
    return pd.DataFrame(rows, columns=["#", "Password", "Masked", "Generated at"])
