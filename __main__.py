"""CLI shim for running the codec directly from the repository checkout."""

from base2048.cli import main
from base2048.codec import Base2048Codec, decode, encode, encoded_length
from base2048.repertoire import Repertoire, load_repertoire, save_repertoire

__all__ = [
    "Base2048Codec",
    "Repertoire",
    "decode",
    "encode",
    "encoded_length",
    "load_repertoire",
    "main",
    "save_repertoire",
]


if __name__ == "__main__":
    main()
