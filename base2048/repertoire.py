import dataclasses
import json
import logging
from typing import Dict, Iterable, Optional, Tuple

from .data import DEFAULT_MAIN_CODE_POINTS, DEFAULT_TAIL_CODE_POINTS
from .errors import RepertoireError

logger = logging.getLogger(__name__)

MAIN_SIZE = 2048
TAIL_SIZE = 8
REPERTOIRE_VERSION = "v1"

_MAX_CODE_POINT = 0x10FFFF


def _is_surrogate(code_point: int) -> bool:
    return 0xD800 <= code_point <= 0xDFFF


def _check_code_points(name: str, code_points: Tuple[int, ...], size: int) -> None:
    if len(code_points) != size:
        raise RepertoireError(
            f"{name} table must hold exactly {size} code points, got {len(code_points)}"
        )
    for cp in code_points:
        if isinstance(cp, bool) or not isinstance(cp, int):
            raise RepertoireError(f"{name} table entry {cp!r} is not an integer code point")
        if cp < 0 or cp > _MAX_CODE_POINT or _is_surrogate(cp):
            raise RepertoireError(f"{name} table entry {cp:#x} is not a valid scalar value")


@dataclasses.dataclass(frozen=True)
class Repertoire:
    """The two code point tables and their reverse maps.

    ``main`` carries one 11-bit group per code point; ``tail`` is reserved for
    a final group holding only one to three real bits. Validation happens
    once, here, so lookups never need to re-check the tables.
    """

    main: Tuple[int, ...]
    tail: Tuple[int, ...]
    _main_index: Dict[int, int] = dataclasses.field(
        init=False, repr=False, compare=False
    )
    _tail_index: Dict[int, int] = dataclasses.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        main = tuple(self.main)
        tail = tuple(self.tail)
        _check_code_points("main", main, MAIN_SIZE)
        _check_code_points("tail", tail, TAIL_SIZE)

        main_index = {cp: i for i, cp in enumerate(main)}
        tail_index = {cp: i for i, cp in enumerate(tail)}
        if len(main_index) != MAIN_SIZE:
            raise RepertoireError("main table contains duplicate code points")
        if len(tail_index) != TAIL_SIZE:
            raise RepertoireError("tail table contains duplicate code points")
        shared = main_index.keys() & tail_index.keys()
        if shared:
            listed = ", ".join(f"U+{cp:04X}" for cp in sorted(shared))
            raise RepertoireError(f"main and tail tables overlap: {listed}")

        # frozen dataclass: bypass __setattr__ for the derived fields
        object.__setattr__(self, "main", main)
        object.__setattr__(self, "tail", tail)
        object.__setattr__(self, "_main_index", main_index)
        object.__setattr__(self, "_tail_index", tail_index)

    @classmethod
    def default(cls) -> "Repertoire":
        return _DEFAULT_REPERTOIRE

    @classmethod
    def from_strings(cls, main: str, tail: str) -> "Repertoire":
        return cls(main=_ords(main), tail=_ords(tail))

    def main_code_point(self, index: int) -> int:
        if not 0 <= index < MAIN_SIZE:
            raise IndexError(f"main index {index} out of range")
        return self.main[index]

    def main_index(self, code_point: int) -> Optional[int]:
        return self._main_index.get(code_point)

    def tail_code_point(self, index: int) -> int:
        if not 0 <= index < TAIL_SIZE:
            raise IndexError(f"tail index {index} out of range")
        return self.tail[index]

    def tail_index(self, code_point: int) -> Optional[int]:
        return self._tail_index.get(code_point)

    def to_dict(self) -> dict:
        return {
            "version": REPERTOIRE_VERSION,
            "main": "".join(map(chr, self.main)),
            "tail": "".join(map(chr, self.tail)),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Repertoire":
        if not isinstance(data, dict):
            raise RepertoireError("repertoire document must be a JSON object")
        version = data.get("version", REPERTOIRE_VERSION)
        if version != REPERTOIRE_VERSION:
            raise RepertoireError(f"Unsupported repertoire version: {version}")
        main = data.get("main")
        tail = data.get("tail")
        if not isinstance(main, str) or not isinstance(tail, str):
            raise RepertoireError("repertoire 'main' and 'tail' must be strings")
        return cls.from_strings(main, tail)


_DEFAULT_REPERTOIRE = Repertoire(
    main=DEFAULT_MAIN_CODE_POINTS, tail=DEFAULT_TAIL_CODE_POINTS
)


def _ords(chars: Iterable[str]) -> Tuple[int, ...]:
    return tuple(ord(c) for c in chars)


def save_repertoire(repertoire: Repertoire, path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(repertoire.to_dict(), f, indent=2, ensure_ascii=False)
        f.write("\n")


def load_repertoire(path) -> Repertoire:
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise RepertoireError(f"Invalid JSON in repertoire file {path}: {exc}") from exc
    repertoire = Repertoire.from_dict(raw)
    logger.info("Loaded repertoire from %s", path)
    return repertoire


__all__ = [
    "MAIN_SIZE",
    "REPERTOIRE_VERSION",
    "TAIL_SIZE",
    "Repertoire",
    "load_repertoire",
    "save_repertoire",
]
