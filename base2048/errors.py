from typing import Optional


class Base2048Error(ValueError):
    """Base class for every error raised by the codec."""


class InvalidCharacterError(Base2048Error):
    def __init__(self, char: str, position: int):
        super().__init__(
            f"Unrecognised Base2048 character {char!r} (U+{ord(char):04X}) "
            f"at position {position}"
        )
        self.char = char
        self.position = position


class MalformedInputError(Base2048Error):
    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class RepertoireError(Base2048Error):
    pass


__all__ = [
    "Base2048Error",
    "InvalidCharacterError",
    "MalformedInputError",
    "RepertoireError",
]
