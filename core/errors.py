# core/errors.py
from __future__ import annotations


class PasswordGenerationError(ValueError):
    """Base class for request errors raised before any random draw."""


class InvalidLengthError(PasswordGenerationError):
    pass


class EmptyCharsetError(PasswordGenerationError):
    pass


class UnknownPresetError(KeyError):
    pass
