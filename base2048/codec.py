import logging
from typing import List, Optional

from .bits import (
    BITS_PER_BYTE,
    Group,
    GroupWidth,
    bytes_to_groups,
    groups_to_bytes,
    padding_for,
)
from .errors import InvalidCharacterError, MalformedInputError
from .repertoire import Repertoire

logger = logging.getLogger(__name__)


def encoded_length(byte_count: int) -> int:
    """Number of code points ``encode`` emits for ``byte_count`` input bytes."""
    if byte_count < 0:
        raise ValueError("byte_count must be >= 0")
    bit_length = byte_count * BITS_PER_BYTE
    full_groups, present = divmod(bit_length, GroupWidth.MAIN)
    return full_groups + (1 if present else 0)


class Base2048Codec:
    """Encoder and decoder bound to one :class:`Repertoire`."""

    def __init__(self, repertoire: Optional[Repertoire] = None):
        self.repertoire = repertoire if repertoire is not None else Repertoire.default()

    def encode(self, data) -> str:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"encode expects a bytes-like object, not {type(data).__name__}"
            )
        payload = bytes(data)
        groups = bytes_to_groups(payload)
        rep = self.repertoire

        chars: List[str] = []
        for value, width in groups:
            if width == GroupWidth.MAIN:
                chars.append(chr(rep.main_code_point(value)))
            else:
                chars.append(chr(rep.tail_code_point(value)))

        if logger.isEnabledFor(logging.DEBUG):
            width, padding = padding_for(len(payload) * BITS_PER_BYTE)
            logger.debug(
                "Encoded %d bytes into %d code points (final group %d bits, %d padding)",
                len(payload),
                len(chars),
                width,
                padding,
            )
        return "".join(chars)

    def decode(self, text: str) -> bytes:
        if not isinstance(text, str):
            raise TypeError(f"decode expects str, not {type(text).__name__}")
        rep = self.repertoire
        last = len(text) - 1

        groups: List[Group] = []
        for position, char in enumerate(text):
            cp = ord(char)
            index = rep.main_index(cp)
            if index is not None:
                groups.append(Group(index, GroupWidth.MAIN))
                continue
            index = rep.tail_index(cp)
            if index is None:
                raise InvalidCharacterError(char, position)
            if position != last:
                raise MalformedInputError(
                    f"Secondary character found before end of input at position {position}",
                    position=position,
                )
            groups.append(Group(index, GroupWidth.TAIL))

        data = groups_to_bytes(groups)
        logger.debug("Decoded %d code points into %d bytes", len(text), len(data))
        return data


_DEFAULT_CODEC = Base2048Codec()


def encode(data) -> str:
    return _DEFAULT_CODEC.encode(data)


def decode(text: str) -> bytes:
    return _DEFAULT_CODEC.decode(text)


__all__ = [
    "Base2048Codec",
    "decode",
    "encode",
    "encoded_length",
]
