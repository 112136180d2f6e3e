"""Caesar cipher with a fixed shift of two, applied to ASCII letters only."""

import string

SHIFT = 2

_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase
_PLAIN = _LOWER + _UPPER
_SHIFTED = _LOWER[SHIFT:] + _LOWER[:SHIFT] + _UPPER[SHIFT:] + _UPPER[:SHIFT]

_ENCRYPT_TABLE = str.maketrans(_PLAIN, _SHIFTED)
_DECRYPT_TABLE = str.maketrans(_SHIFTED, _PLAIN)


def encrypt(line: str) -> str:
    """Shift every ASCII letter forward by two, wrapping within its case."""
    return line.translate(_ENCRYPT_TABLE)


def decrypt(line: str) -> str:
    """Shift every ASCII letter back by two, undoing :func:`encrypt`."""
    return line.translate(_DECRYPT_TABLE)