import os
import random
import threading

import pytest

import base2048
from base2048 import (
    Base2048Codec,
    InvalidCharacterError,
    MalformedInputError,
    Repertoire,
)

REP = Repertoire.default()
MAIN_SET = set(REP.main)
TAIL_SET = set(REP.tail)


@pytest.mark.parametrize("length", list(range(0, 65)) + [255, 1000])
def test_round_trip_random_payloads(length: int) -> None:
    payload = os.urandom(length)
    encoded = base2048.encode(payload)
    assert base2048.decode(encoded) == payload
    assert len(encoded) == base2048.encoded_length(length)


@pytest.mark.parametrize("length", range(0, 23))
def test_round_trip_edge_bytes(length: int) -> None:
    for fill in (b"\x00", b"\xff", b"\x80", b"\x01"):
        payload = fill * length
        assert base2048.decode(base2048.encode(payload)) == payload


def test_empty() -> None:
    assert base2048.encode(b"") == ""
    assert base2048.decode("") == b""


def test_single_zero_byte() -> None:
    encoded = base2048.encode(b"\x00")
    assert encoded == chr(REP.main_code_point(0b00000000111))
    assert base2048.decode(encoded) == b"\x00"


def test_three_ff_bytes_use_tail_table() -> None:
    encoded = base2048.encode(b"\xff\xff\xff")
    assert encoded == (
        chr(REP.main_code_point(2047)) * 2 + chr(REP.tail_code_point(0b111))
    )
    assert base2048.decode(encoded) == b"\xff\xff\xff"


def test_eleven_bytes_fill_eight_main_code_points() -> None:
    payload = bytes(range(1, 12))
    encoded = base2048.encode(payload)
    assert len(encoded) == 8
    assert all(ord(c) in MAIN_SET for c in encoded)
    assert base2048.decode(encoded) == payload


@pytest.mark.parametrize("length", range(0, 45))
def test_tail_code_point_only_last_and_only_for_short_remainders(length: int) -> None:
    encoded = base2048.encode(os.urandom(length))
    present = (length * 8) % 11
    for c in encoded[:-1]:
        assert ord(c) in MAIN_SET
    if encoded:
        assert (ord(encoded[-1]) in TAIL_SET) == (present in (1, 2, 3))
        assert (ord(encoded[-1]) in MAIN_SET) != (ord(encoded[-1]) in TAIL_SET)


@pytest.mark.parametrize(
    "byte_count,expected",
    [(0, 0), (1, 1), (2, 2), (3, 3), (4, 3), (10, 8), (11, 8), (12, 9), (22, 16)],
)
def test_encoded_length(byte_count: int, expected: int) -> None:
    assert base2048.encoded_length(byte_count) == expected
    assert len(base2048.encode(bytes(byte_count))) == expected


def test_encoded_length_rejects_negative() -> None:
    with pytest.raises(ValueError):
        base2048.encoded_length(-1)


def test_deterministic() -> None:
    payload = b"deterministic payload"
    assert base2048.encode(payload) == base2048.encode(payload)
    encoded = base2048.encode(payload)
    assert base2048.decode(encoded) == base2048.decode(encoded)


def test_accepts_bytes_like_inputs() -> None:
    payload = b"bytes-like"
    expected = base2048.encode(payload)
    assert base2048.encode(bytearray(payload)) == expected
    assert base2048.encode(memoryview(payload)) == expected


@pytest.mark.parametrize("value", ["text", 42, None, [1, 2, 3]])
def test_encode_rejects_non_bytes(value) -> None:
    with pytest.raises(TypeError):
        base2048.encode(value)


@pytest.mark.parametrize("value", [b"bytes", 42, None])
def test_decode_rejects_non_str(value) -> None:
    with pytest.raises(TypeError):
        base2048.decode(value)


def test_decode_rejects_unknown_character() -> None:
    encoded = base2048.encode(b"hello world")
    corrupted = encoded[:3] + "!" + encoded[3:]
    with pytest.raises(InvalidCharacterError) as excinfo:
        base2048.decode(corrupted)
    assert excinfo.value.char == "!"
    assert excinfo.value.position == 3
    assert isinstance(excinfo.value, ValueError)


def test_decode_rejects_tail_before_end() -> None:
    encoded = base2048.encode(b"\xff\xff\xff")
    with pytest.raises(MalformedInputError) as excinfo:
        base2048.decode(encoded + encoded[0])
    assert excinfo.value.position == 2


def test_decode_rejects_truncated_text() -> None:
    # 2 bytes encode to 2 main code points; dropping one leaves 11 bits whose
    # trailing 3 bits are real data rather than 1-padding
    encoded = base2048.encode(b"\x00\x00")
    with pytest.raises(MalformedInputError):
        base2048.decode(encoded[:1])


def test_custom_repertoire_is_used() -> None:
    main = tuple(reversed(REP.main))
    tail = tuple(reversed(REP.tail))
    codec = Base2048Codec(Repertoire(main=main, tail=tail))
    payload = b"\x00"
    encoded = codec.encode(payload)
    assert encoded == chr(main[0b111])
    assert codec.decode(encoded) == payload
    assert encoded != base2048.encode(payload)


def test_concurrent_calls_share_default_table() -> None:
    rng = random.Random(1234)
    payloads = [bytes(rng.randrange(256) for _ in range(n)) for n in range(40)]
    failures = []

    def worker() -> None:
        for payload in payloads:
            if base2048.decode(base2048.encode(payload)) != payload:
                failures.append(payload)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert failures == []
