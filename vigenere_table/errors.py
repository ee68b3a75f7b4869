"""
Errors raised by the table cipher.

All of them are ValueError subclasses: a bad key or an out-of-charset
character is a bad argument, and callers who already catch ValueError
keep working.
"""


class CipherError(ValueError):
    """Base class for every error raised by vigenere_table."""


class InvalidKeyLengthError(CipherError):
    """Key is shorter than the minimum length."""

    def __init__(self, length: int, minimum: int):
        super().__init__(
            f"Key must be at least {minimum} characters long (got {length})."
        )
        self.length  = length
        self.minimum = minimum


class CharacterNotInCharsetError(CipherError):
    """A plaintext or key character is missing from the configured charset."""

    def __init__(self, char: str, position: int, role: str):
        super().__init__(
            f"Invalid argument: {role} character {char!r} at position {position} "
            f"is not in the charset. Plaintext and key characters must all be "
            f"within the configured charset."
        )
        self.char     = char
        self.position = position
        self.role     = role
