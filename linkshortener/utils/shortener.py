"""Shortcode generation utility

This module provides a helper function for generating short, random,
fixed-length identifiers for shortened URLs.

Functions:
    generate_shortcode(length=5, alphabet=SHORTCODE_ALPHABET):
        Generate a random string suitable for use as a URL slug.

Example:
    >>> from linkshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'q3ZbK'
"""

import random

from linkshortener.constants import SHORTCODE_ALPHABET, SHORTCODE_LENGTH


def generate_shortcode(length: int = SHORTCODE_LENGTH, alphabet: str = SHORTCODE_ALPHABET) -> str:
    """Generate a random, fixed-length URL shortcode.

    Every character is drawn independently and uniformly from `alphabet`.
    The randomness source is not cryptographically secure: shortcodes are
    meant to be short and collision resistant, not secret.

    Args:
        length (int, optional):
            Number of characters in the shortcode.
            Defaults to 5.

        alphabet (str, optional):
            Characters to draw from.
            Defaults to the Base62 alphabet [a-zA-Z0-9].

    Returns:
        str: A random shortcode of exactly `length` characters.

    Example:
        >>> generate_shortcode(length=7)
        'Gh71WPT'
        >>> generate_shortcode(length=3, alphabet='ab')
        'aba'

    NOTE:
        - 62**5 (~9.2 * 10**8) possible shortcodes means collisions are
          expected under sustained load. Uniqueness is enforced by the data
          store at insertion time, never by this function.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')
    if not isinstance(alphabet, str):
        raise TypeError(f'Alphabet must be of type string (given type: {type(alphabet)}).')
    if not alphabet:
        raise ValueError(f'Alphabet must be a non-empty string (given value: {alphabet!r}).')

    return ''.join(random.choices(alphabet, k=length))  # noqa: S311
