# core/strength_utils.py
from __future__ import annotations
import math
from dataclasses import dataclass

from core.config import CHAR_SETS, STRENGTH_TIERS
from core.password_utils import CharacterClassSelection


@dataclass(frozen=True)
class StrengthAssessment:
    tier_level: int
    label: str
    entropy_bits: int
    color: str


def charset_size(selection: CharacterClassSelection) -> int:
    return sum(len(CHAR_SETS[key]) for key in selection.enabled_classes())


def entropy_bits(length: int, alphabet_size: int) -> float:
    # H = L * log2(N); zero instead of NaN/inf for degenerate input
    if not math.isfinite(length) or length <= 0 or alphabet_size <= 0:
        return 0.0
    return length * math.log2(alphabet_size)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def assess(length: int, selection: CharacterClassSelection) -> StrengthAssessment:
    """
    A-priori strength of a (length, selection) configuration.

    Never raises: no enabled class gives 0 bits and the lowest tier. Tier
    thresholds compare against the unrounded entropy.
    """
    bits = entropy_bits(length, charset_size(selection))
    tier, label, color = STRENGTH_TIERS[0][1:]
    for lower, t, l, c in STRENGTH_TIERS:
        if bits >= lower:
            tier, label, color = t, l, c
    return StrengthAssessment(tier_level=tier, label=label, entropy_bits=_round_half_up(bits), color=color)
