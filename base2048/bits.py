"""Bit-level packing between octets and fixed-width groups.

The octet sequence is read as one contiguous bit string, most significant
bit of each octet first. It is sliced into 11-bit groups; a short final
group is padded with 1 bits, either out to 11 bits or, when it holds only
one to three real bits, out to 3 bits. Either way fewer than 8 padding bits
are added, so the decoder recovers the octet count from the total bit
length alone: the padding is always the last ``total_bits % 8`` bits.
"""

import enum
from typing import List, NamedTuple, Sequence, Tuple

from .errors import MalformedInputError

BITS_PER_BYTE = 8


class GroupWidth(enum.IntEnum):
    MAIN = 11
    TAIL = 3


class Group(NamedTuple):
    value: int
    width: int


def padding_for(bit_length: int) -> Tuple[GroupWidth, int]:
    """Return the final group's width and its padding bit count.

    ``(GroupWidth.MAIN, 0)`` means the stream divides into whole 11-bit
    groups and nothing is padded.
    """
    if bit_length < 0:
        raise ValueError("bit_length must be >= 0")
    present = bit_length % GroupWidth.MAIN
    if present == 0:
        return GroupWidth.MAIN, 0
    if present <= GroupWidth.TAIL:
        return GroupWidth.TAIL, GroupWidth.TAIL - present
    return GroupWidth.MAIN, GroupWidth.MAIN - present


def bytes_to_groups(data: bytes) -> List[Group]:
    groups: List[Group] = []
    acc = 0
    acc_bits = 0
    for byte in data:
        acc = (acc << BITS_PER_BYTE) | byte
        acc_bits += BITS_PER_BYTE
        if acc_bits >= GroupWidth.MAIN:
            acc_bits -= GroupWidth.MAIN
            groups.append(Group(acc >> acc_bits, GroupWidth.MAIN))
            acc &= (1 << acc_bits) - 1

    if acc_bits:
        width, padding = padding_for(len(data) * BITS_PER_BYTE)
        # Padding bits are 1s, appended below the real bits
        value = (acc << padding) | ((1 << padding) - 1)
        groups.append(Group(value, width))
    return groups


def groups_to_bytes(groups: Sequence[Group]) -> bytes:
    if not groups:
        return b""

    total_bits = sum(width for _, width in groups)
    padding = total_bits % BITS_PER_BYTE
    last_width = groups[-1].width
    if padding >= last_width:
        raise MalformedInputError(
            f"{padding} padding bits cannot fit in a final group of {last_width} bits",
            position=len(groups) - 1,
        )

    out = bytearray()
    acc = 0
    acc_bits = 0
    for position, (value, width) in enumerate(groups):
        if value < 0 or value >> width:
            raise MalformedInputError(
                f"group value {value} does not fit in {width} bits", position=position
            )
        acc = (acc << width) | value
        acc_bits += width
        while acc_bits >= BITS_PER_BYTE:
            acc_bits -= BITS_PER_BYTE
            out.append(acc >> acc_bits)
            acc &= (1 << acc_bits) - 1

    # acc now holds exactly the stripped padding bits
    if acc != (1 << padding) - 1:
        raise MalformedInputError("Padding mismatch", position=len(groups) - 1)
    return bytes(out)


__all__ = [
    "BITS_PER_BYTE",
    "Group",
    "GroupWidth",
    "bytes_to_groups",
    "groups_to_bytes",
    "padding_for",
]
