import pytest

from core.password_utils import CharacterClassSelection


@pytest.fixture
def all_classes():
    return CharacterClassSelection(uppercase=True, lowercase=True, numbers=True, special=True)


@pytest.fixture
def no_classes():
    return CharacterClassSelection(uppercase=False, lowercase=False, numbers=False, special=False)


@pytest.fixture
def digits_only():
    return CharacterClassSelection(uppercase=False, lowercase=False, numbers=True, special=False)
