"""
Keyed Vigenère Table Cipher
===========================
Polyalphabetic substitution over a caller-defined charset.

Table:  N×N grid built from a permutation `perm` of the charset,
        cell (i, j) = perm[(i + j) mod N]. Every row and every column
        is a permutation of the charset (Latin square).

Key:    at least 10 characters, all from the charset. Key position k
        selects table row (index(key[k]) + k) mod N. The `+ k` offset
        is what separates this from textbook Vigenère, where the row
        is just index(key[k]).

Encrypt: out[i] = table[row(i mod len(key))][index(plain[i])]
Decrypt: scan that row for the cipher character, emit charset[col].

The table is built once and never mutated, so one instance can be
shared between threads without locking.

Not secure. Frequency and known-plaintext analysis both break it;
it is a reversible, deterministic substitution for teaching and demos.

Dependencies: none (standard library only)
"""

import logging
import random
import string
from typing import Optional, Sequence, Tuple

from .errors import CipherError, CharacterNotInCharsetError, InvalidKeyLengthError

logger = logging.getLogger(__name__)

DEFAULT_CHARSET = string.ascii_lowercase + string.ascii_uppercase + "_" + string.digits

# Returned by locate() when a row holds no matching cell.
NO_MATCH = -1

_SYSTEM_RNG = random.SystemRandom()


class SubstitutionCipher:
    """
    Vigenère-family cipher over an arbitrary ordered charset.

    With shuffle=True (the default) the charset is permuted once at
    construction, so only this instance can decrypt what it encrypted.
    Pass shuffle=False, or a fixed `seed`, to get the same table from
    every instance built on the same charset.
    """

    MIN_KEY_LENGTH = 10

    def __init__(self, charset: Sequence[str], shuffle: bool = True, *,
                 seed: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        charset = "".join(charset)
        if not charset:
            raise CipherError("Charset must contain at least one character.")
        # Rejected even when shuffle=False and neither would be used.
        if seed is not None and rng is not None:
            raise CipherError("Pass either seed or rng, not both.")

        self._charset = charset
        self._size    = len(charset)
        self._shuffled = shuffle

        # First occurrence wins when the charset repeats a character.
        self._index = {}
        for i, ch in enumerate(charset):
            self._index.setdefault(ch, i)
        if len(self._index) != self._size:
            logger.warning(
                f"Charset has {self._size - len(self._index)} duplicate "
                f"character(s); decryption will be ambiguous"
            )

        perm = list(charset)
        if shuffle:
            if rng is None:
                rng = random.Random(seed) if seed is not None else _SYSTEM_RNG
            rng.shuffle(perm)

        self._table = tuple(
            "".join(perm[i:] + perm[:i]) for i in range(self._size)
        )
        logger.info(f"SubstitutionCipher N={self._size} shuffled={shuffle}")

    # ── properties ───────────────────────────────────────────────────────────

    @property
    def charset(self) -> str:
        return self._charset

    @property
    def size(self) -> int:
        return self._size

    @property
    def shuffled(self) -> bool:
        return self._shuffled

    @property
    def table(self) -> Tuple[str, ...]:
        """The N rows of the substitution table, each a string of N characters."""
        return self._table

    # ── key schedule ─────────────────────────────────────────────────────────

    def key_rows(self, key: str) -> Tuple[int, ...]:
        """
        Project a key onto table rows: row[k] = (index(key[k]) + k) mod N.

        Raises InvalidKeyLengthError for keys shorter than MIN_KEY_LENGTH
        and CharacterNotInCharsetError for key characters outside the
        charset.
        """
        if len(key) < self.MIN_KEY_LENGTH:
            raise self._logged(InvalidKeyLengthError(len(key), self.MIN_KEY_LENGTH))
        rows = []
        for k, ch in enumerate(key):
            pos = self._index.get(ch)
            if pos is None:
                raise self._logged(CharacterNotInCharsetError(ch, k, "key"))
            rows.append((pos + k) % self._size)
        return tuple(rows)

    # ── transforms ───────────────────────────────────────────────────────────

    def encrypt(self, plaintext: str, key: str) -> str:
        """Encrypt plaintext. Every character must be in the charset."""
        rows = self.key_rows(key)
        period = len(rows)
        out = []
        for i, ch in enumerate(plaintext):
            col = self._index.get(ch)
            if col is None:
                raise self._logged(CharacterNotInCharsetError(ch, i, "plaintext"))
            out.append(self._table[rows[i % period]][col])
        logger.debug(f"encrypt: {len(plaintext)} chars, key period {period}")
        return "".join(out)

    def decrypt(self, ciphertext: str, key: str) -> str:
        """
        Decrypt ciphertext produced by encrypt() with the same key.

        A character that does not occur in its table row decodes to
        charset[0] instead of raising.
        """
        rows = self.key_rows(key)
        period = len(rows)
        out = []
        for i, ch in enumerate(ciphertext):
            col = self.locate(rows[i % period], ch)
            if col == NO_MATCH:
                col = 0
            out.append(self._charset[col])
        logger.debug(f"decrypt: {len(ciphertext)} chars, key period {period}")
        return "".join(out)

    def locate(self, row: int, char: str) -> int:
        """Column of `char` in table row `row`, or NO_MATCH."""
        if not 0 <= row < self._size:
            raise self._logged(
                CipherError(f"Row {row} is outside the table (0..{self._size - 1}).")
            )
        col = NO_MATCH
        # Intentional: the whole row is scanned and the LAST match is kept.
        for j, cell in enumerate(self._table[row]):
            if cell == char:
                col = j
        return col

    # ── helpers ──────────────────────────────────────────────────────────────

    @staticmethod
    def _logged(err: CipherError) -> CipherError:
        logger.error(str(err))
        return err

    def __repr__(self):
        return f"SubstitutionCipher(N={self._size}, shuffled={self._shuffled})"
