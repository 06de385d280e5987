"""Tests for the entropy-based strength estimator."""

import math

import pytest

from core.password_utils import CharacterClassSelection
from core.strength_utils import StrengthAssessment, assess, charset_size, entropy_bits


@pytest.mark.parametrize(
    ("length", "tier", "label", "bits"),
    [
        (1, 1, "Very Weak", 6),
        (5, 2, "Weak", 32),
        (8, 3, "Fair", 52),
        (11, 4, "Good", 71),
        (12, 4, "Good", 78),
        (16, 5, "Strong", 103),
        (20, 6, "Very Strong", 129),
        (32, 6, "Very Strong", 207),
    ],
)
def test_assess_all_classes_tiers(length, tier, label, bits, all_classes):
    result = assess(length, all_classes)
    assert result.tier_level == tier
    assert result.label == label
    assert result.entropy_bits == bits


def test_assess_uppercase_only_entropy_is_exact():
    result = assess(10, CharacterClassSelection.from_mapping({"uppercase": True}))
    assert result.entropy_bits == 47
    assert result.tier_level == 3


@pytest.mark.parametrize(
    ("length", "color"),
    [
        (4, "#dc2626"),
        (5, "#ef4444"),
        (9, "#f97316"),
        (12, "#eab308"),
        (15, "#22c55e"),
        (20, "#16a34a"),
    ],
)
def test_assess_colors(length, color, all_classes):
    assert assess(length, all_classes).color == color


def test_assess_tier_uses_unrounded_entropy():
    # 6 * log2(26) = 28.2 -> Weak; 10 * log2(10) = 33.2 -> Weak
    upper = CharacterClassSelection.from_mapping({"uppercase": True})
    digits = CharacterClassSelection.from_mapping({"numbers": True})
    assert assess(6, upper).label == "Weak"
    assert assess(5, upper).label == "Very Weak"
    assert assess(10, digits).label == "Weak"


def test_assess_rounds_half_up():
    # 7 * log2(62) = 41.68; 13 * log2(62) = 77.40
    sel = CharacterClassSelection(uppercase=False, lowercase=True, numbers=True, special=True)
    assert assess(7, sel).entropy_bits == 42
    assert assess(13, sel).entropy_bits == 77
    assert assess(13, sel).label == "Good"


def test_assess_without_classes_is_total(no_classes):
    result = assess(16, no_classes)
    assert result == StrengthAssessment(tier_level=1, label="Very Weak", entropy_bits=0, color="#dc2626")


def test_assess_degenerate_length(all_classes):
    assert assess(0, all_classes).entropy_bits == 0
    assert assess(-3, all_classes).tier_level == 1


def test_entropy_is_monotonic_in_length(all_classes):
    values = [assess(n, all_classes).entropy_bits for n in range(1, 129)]
    assert values == sorted(values)


def test_charset_size_matches_class_sizes():
    assert charset_size(CharacterClassSelection()) == 88
    assert charset_size(CharacterClassSelection(uppercase=True, lowercase=False, numbers=True, special=False)) == 36


def test_entropy_bits_formula():
    assert entropy_bits(10, 26) == pytest.approx(10 * math.log2(26))
    assert entropy_bits(10, 0) == 0.0


@pytest.mark.parametrize("length", [float("inf"), float("-inf"), float("nan")])
def test_assess_non_finite_length_is_total(length, all_classes):
    result = assess(length, all_classes)
    assert result.entropy_bits == 0
    assert result.tier_level == 1
    assert entropy_bits(length, 88) == 0.0
