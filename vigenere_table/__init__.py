"""
vigenere_table — Keyed Vigenère Table Cipher
============================================
Polyalphabetic substitution over any ordered charset, driven by an
N×N Latin-square table and a position-offset key schedule.

    from vigenere_table import SubstitutionCipher

    cipher = SubstitutionCipher("abcdefghijklmnopqrstuvwxyz0123456789", shuffle=False)
    ct = cipher.encrypt("helloworld", "1234567890")
    assert cipher.decrypt(ct, "1234567890") == "helloworld"

Educational only. Not resistant to frequency analysis.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .cipher import SubstitutionCipher, DEFAULT_CHARSET, NO_MATCH
from .errors import CipherError, InvalidKeyLengthError, CharacterNotInCharsetError

__all__ = [
    "SubstitutionCipher",
    "DEFAULT_CHARSET",
    "NO_MATCH",
    "CipherError",
    "InvalidKeyLengthError",
    "CharacterNotInCharsetError",
]
