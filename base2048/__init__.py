"""Binary-to-text encoding at 11 bits per Unicode code point."""

from .bits import Group, GroupWidth, bytes_to_groups, groups_to_bytes, padding_for
from .codec import Base2048Codec, decode, encode, encoded_length
from .errors import (
    Base2048Error,
    InvalidCharacterError,
    MalformedInputError,
    RepertoireError,
)
from .repertoire import Repertoire, load_repertoire, save_repertoire

__all__ = [
    "Base2048Codec",
    "Base2048Error",
    "Group",
    "GroupWidth",
    "InvalidCharacterError",
    "MalformedInputError",
    "Repertoire",
    "RepertoireError",
    "bytes_to_groups",
    "decode",
    "encode",
    "encoded_length",
    "groups_to_bytes",
    "load_repertoire",
    "padding_for",
    "save_repertoire",
]

__version__ = "0.1.0"
