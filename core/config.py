# core/config.py
from __future__ import annotations
import os
import string
from typing import Dict, List, Tuple

# =========================
# Bảng ký tự (thứ tự cố định)
# =========================
UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Concatenation order of the charset follows this tuple
CLASS_ORDER: Tuple[str, ...] = ("uppercase", "lowercase", "numbers", "special")

CHAR_SETS: Dict[str, str] = {
    "uppercase": UPPERCASE,
    "lowercase": LOWERCASE,
    "numbers": NUMBERS,
    "special": SPECIAL,
}

CLASS_LABELS: Dict[str, str] = {
    "uppercase": "A–Z",
    "lowercase": "a–z",
    "numbers": "0–9",
    "special": "Symbols",
}

# =========================
# Độ dài & preset
# =========================
MIN_LENGTH = 1
MAX_LENGTH = 128

LENGTH_PRESETS: Dict[str, int] = {
    "short": 8,
    "medium": 12,
    "strong": 16,
    "maximum": 32,
}
DEFAULT_PRESET = "strong"

HISTORY_LIMIT = 10

# =========================
# Ngưỡng entropy -> mức độ
# (lower bound, tier, label, color), tăng dần
# =========================
STRENGTH_TIERS: List[Tuple[float, int, str, str]] = [
    (0,   1, "Very Weak",   "#dc2626"),
    (28,  2, "Weak",        "#ef4444"),
    (36,  3, "Fair",        "#f97316"),
    (60,  4, "Good",        "#eab308"),
    (80,  5, "Strong",      "#22c55e"),
    (128, 6, "Very Strong", "#16a34a"),
]

LOG_LEVEL = os.getenv("SECUREPASS_LOG_LEVEL", "INFO").upper()
