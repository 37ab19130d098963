import pytest

from base2048 import Group, GroupWidth, MalformedInputError
from base2048.bits import bytes_to_groups, groups_to_bytes, padding_for


@pytest.mark.parametrize(
    "bit_length,expected",
    [
        (0, (GroupWidth.MAIN, 0)),
        (8, (GroupWidth.MAIN, 3)),
        (16, (GroupWidth.MAIN, 6)),
        (24, (GroupWidth.TAIL, 1)),
        (32, (GroupWidth.MAIN, 1)),
        (40, (GroupWidth.MAIN, 4)),
        (48, (GroupWidth.MAIN, 7)),
        (56, (GroupWidth.TAIL, 2)),
        (64, (GroupWidth.MAIN, 2)),
        (72, (GroupWidth.MAIN, 5)),
        (80, (GroupWidth.TAIL, 0)),
        (88, (GroupWidth.MAIN, 0)),
        (96, (GroupWidth.MAIN, 3)),
        (12, (GroupWidth.TAIL, 2)),
    ],
)
def test_padding_policy(bit_length: int, expected) -> None:
    assert padding_for(bit_length) == expected


@pytest.mark.parametrize("byte_count", range(0, 89))
def test_padding_is_always_below_one_byte(byte_count: int) -> None:
    bit_length = byte_count * 8
    width, padding = padding_for(bit_length)
    assert 0 <= padding <= 7
    groups = bytes_to_groups(bytes(byte_count))
    total_bits = sum(g.width for g in groups)
    assert total_bits - bit_length == padding
    assert total_bits % 8 == padding
    if groups:
        assert groups[-1].width == width


def test_empty_input_has_no_groups() -> None:
    assert bytes_to_groups(b"") == []
    assert groups_to_bytes([]) == b""


def test_single_zero_byte_is_padded_with_ones() -> None:
    assert bytes_to_groups(b"\x00") == [Group(0b00000000111, GroupWidth.MAIN)]


def test_three_ff_bytes_end_in_tail_group() -> None:
    groups = bytes_to_groups(b"\xff\xff\xff")
    assert groups == [
        Group(0b11111111111, GroupWidth.MAIN),
        Group(0b11111111111, GroupWidth.MAIN),
        Group(0b111, GroupWidth.TAIL),
    ]
    assert groups_to_bytes(groups) == b"\xff\xff\xff"


def test_groups_read_msb_first() -> None:
    # 0xA5 0x0F -> 10100101 00001111 -> 10100101000 | 01111 + 111111
    groups = bytes_to_groups(b"\xa5\x0f")
    assert groups == [
        Group(0b10100101000, GroupWidth.MAIN),
        Group(0b01111111111, GroupWidth.MAIN),
    ]


def test_exact_multiple_of_eleven_adds_no_padding() -> None:
    payload = bytes(range(11))
    groups = bytes_to_groups(payload)
    assert len(groups) == 8
    assert all(g.width == GroupWidth.MAIN for g in groups)
    assert groups_to_bytes(groups) == payload


def test_rejects_zero_padding_bits() -> None:
    groups = bytes_to_groups(b"\x00")
    tampered = [Group(groups[0].value & ~1, GroupWidth.MAIN)]
    with pytest.raises(MalformedInputError, match="Padding mismatch"):
        groups_to_bytes(tampered)


def test_rejects_padding_wider_than_final_group() -> None:
    # 11 + 3 = 14 bits leaves 6 padding bits, more than a tail group holds
    groups = [Group(0, GroupWidth.MAIN), Group(0b111, GroupWidth.TAIL)]
    with pytest.raises(MalformedInputError):
        groups_to_bytes(groups)


def test_rejects_value_wider_than_group() -> None:
    with pytest.raises(MalformedInputError):
        groups_to_bytes([Group(2048, GroupWidth.MAIN)])


def test_negative_bit_length_is_rejected() -> None:
    with pytest.raises(ValueError):
        padding_for(-8)
