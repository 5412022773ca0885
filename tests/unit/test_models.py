"""Unit tests for the ShortURLModel dataclass in models.py.

Test coverage includes:

1. Model creation
   - expires_at is optional and defaults to None (permanent link).

2. Equality semantics
   - Models with identical data compare equal, differing fields do not.

3. Immutability
   - Fields are frozen and cannot be reassigned after creation.
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, UTC

import pytest

from linkshortener.models import ShortURLModel


# -------------------------------
# 1. Model creation
# -------------------------------

def test_short_url_model_creation():
    expires_at = datetime(2026, 1, 1, tzinfo=UTC)
    short_url = ShortURLModel(target='https://example.com/article/123', shortcode='abc12', expires_at=expires_at)

    assert short_url.target == 'https://example.com/article/123'
    assert short_url.shortcode == 'abc12'
    assert short_url.expires_at == expires_at


def test_expires_at_defaults_to_none():
    assert ShortURLModel(target='https://example.com', shortcode='abc12').expires_at is None


# -------------------------------
# 2. Equality semantics
# -------------------------------

def test_equal_models():
    assert ShortURLModel('https://example.com', 'abc12') == ShortURLModel('https://example.com', 'abc12')


@pytest.mark.parametrize(
    'other',
    [
        ShortURLModel('https://example.org', 'abc12'),
        ShortURLModel('https://example.com', 'xyz89'),
        ShortURLModel('https://example.com', 'abc12', datetime(2026, 1, 1, tzinfo=UTC)),
    ],
)
def test_unequal_models(other):
    assert ShortURLModel('https://example.com', 'abc12') != other


# -------------------------------
# 3. Immutability
# -------------------------------

@pytest.mark.parametrize('field', ['target', 'shortcode', 'expires_at'])
def test_fields_are_frozen(field):
    short_url = ShortURLModel('https://example.com', 'abc12')
    with pytest.raises(FrozenInstanceError):
        setattr(short_url, field, None)
