"""Unit tests for the generate_shortcode function in shortener.py.

Test coverage includes:

1. Basic functionality
   - Ensures the function returns a 5-character string by default.

2. Output format
   - All characters must belong to the Base62 alphabet (letters and digits only).

3. Custom length and alphabet
   - The 'length' and 'alphabet' arguments must be respected.

4. Randomness
   - Repeated calls produce different shortcodes.

5. Error handling
   - Ensures invalid arguments raise appropriate exceptions.
"""

import string

import pytest

from linkshortener.utils import generate_shortcode
from linkshortener.constants import SHORTCODE_ALPHABET, SHORTCODE_LENGTH


BASE62 = set(string.ascii_letters + string.digits)


# -------------------------------
# 1. Basic functionality and type
# -------------------------------

def test_generate_shortcode_returns_five_character_string():
    result = generate_shortcode()
    assert isinstance(result, str)
    assert len(result) == SHORTCODE_LENGTH == 5


# -------------------------------
# 2. Output format
# -------------------------------

def test_alphabet_is_base62():
    assert len(SHORTCODE_ALPHABET) == 62
    assert set(SHORTCODE_ALPHABET) == BASE62


def test_generate_shortcode_only_uses_base62_characters():
    for _ in range(1_000):
        assert set(generate_shortcode()) <= BASE62


# -------------------------------
# 3. Custom length and alphabet
# -------------------------------

@pytest.mark.parametrize('length', [1, 5, 7, 32])
def test_generate_shortcode_respects_length(length):
    assert len(generate_shortcode(length=length)) == length


def test_generate_shortcode_respects_alphabet():
    result = generate_shortcode(length=50, alphabet='ab')
    assert set(result) <= {'a', 'b'}


def test_generate_shortcode_with_single_symbol_alphabet():
    assert generate_shortcode(length=4, alphabet='x') == 'xxxx'


# -------------------------------
# 4. Randomness
# -------------------------------

def test_generate_shortcode_is_random():
    shortcodes = {generate_shortcode() for _ in range(100)}
    assert len(shortcodes) > 90


def test_generate_shortcode_draws_from_random_choices(monkeypatch):
    monkeypatch.setattr('linkshortener.utils.shortener.random.choices', lambda alphabet, k: ['Z'] * k)
    assert generate_shortcode() == 'ZZZZZ'


# -------------------------------
# 5. Error handling
# -------------------------------

@pytest.mark.parametrize('length', [0, -1])
def test_non_positive_length_raises_value_error(length):
    with pytest.raises(ValueError, match='Length must be a positive integer'):
        generate_shortcode(length=length)


@pytest.mark.parametrize('length', ['5', 5.0, None, True])
def test_non_integer_length_raises_type_error(length):
    with pytest.raises(TypeError, match='Length must be of type integer'):
        generate_shortcode(length=length)


def test_empty_alphabet_raises_value_error():
    with pytest.raises(ValueError, match='Alphabet must be a non-empty string'):
        generate_shortcode(alphabet='')


@pytest.mark.parametrize('alphabet', [None, ['a', 'b'], 62])
def test_non_string_alphabet_raises_type_error(alphabet):
    with pytest.raises(TypeError, match='Alphabet must be of type string'):
        generate_shortcode(alphabet=alphabet)
