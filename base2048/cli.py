import argparse
import logging
import sys
from typing import List, Optional

from .codec import Base2048Codec
from .repertoire import Repertoire, load_repertoire, save_repertoire

logger = logging.getLogger(__name__)


def _read_bytes(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write_bytes(path: str, data: bytes) -> None:
    if path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        with open(path, "wb") as f:
            f.write(data)


def _write_text(path: str, text: str) -> None:
    if path == "-":
        sys.stdout.write(text)
        sys.stdout.flush()
    else:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Base2048 binary-to-text codec (11 bits per code point)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log codec details to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--repertoire",
        default=None,
        help="Path to a repertoire JSON file (defaults to the built-in table)",
    )

    enc = subparsers.add_parser("encode", parents=[common])
    enc.add_argument("--input", required=True, help="Binary input file, or - for stdin")
    enc.add_argument("--output", required=True, help="Text output file, or - for stdout")
    enc.add_argument(
        "--newline", action="store_true", help="Terminate the encoded text with a newline"
    )

    dec = subparsers.add_parser("decode", parents=[common])
    dec.add_argument("--input", required=True, help="Text input file, or - for stdin")
    dec.add_argument("--output", required=True, help="Binary output file, or - for stdout")

    rep = subparsers.add_parser("repertoire", parents=[common])
    rep.add_argument("--output", required=True, help="JSON output file")

    return parser


def _resolve_repertoire(path: Optional[str]) -> Repertoire:
    if path is None:
        return Repertoire.default()
    return load_repertoire(path)


def run_encode(args) -> None:
    codec = Base2048Codec(_resolve_repertoire(args.repertoire))
    payload = _read_bytes(args.input)
    text = codec.encode(payload)
    if args.newline:
        text += "\n"
    _write_text(args.output, text)


def _strip_line_ending(text: str, repertoire: Repertoire) -> str:
    # Only line-ending characters that cannot be table entries are dropped
    end = len(text)
    while end and text[end - 1] in "\r\n":
        cp = ord(text[end - 1])
        if repertoire.main_index(cp) is not None or repertoire.tail_index(cp) is not None:
            break
        end -= 1
    return text[:end]


def run_decode(args) -> None:
    repertoire = _resolve_repertoire(args.repertoire)
    codec = Base2048Codec(repertoire)
    encoded_text = _strip_line_ending(_read_text(args.input), repertoire)
    data = codec.decode(encoded_text)
    _write_bytes(args.output, data)


def run_repertoire(args) -> None:
    repertoire = _resolve_repertoire(args.repertoire)
    save_repertoire(repertoire, args.output)
    logger.info("Wrote repertoire to %s", args.output)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
    )

    try:
        if args.command == "encode":
            run_encode(args)
        elif args.command == "decode":
            run_decode(args)
        elif args.command == "repertoire":
            run_repertoire(args)
        else:
            parser.error("Unknown command")
    except ValueError as exc:
        parser.error(str(exc))


__all__ = ["build_arg_parser", "run_encode", "run_decode", "run_repertoire", "main"]
