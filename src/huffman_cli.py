#!/usr/bin/env python3
"""
Command line front end for the Huffman text codec.

    huffman-codec notes.txt               # writes notes.txt.o
    huffman-codec -d notes.txt.o -o out   # restores the text into out
"""
import argparse
import enum
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from huffman_errors import DomainError, HuffmanError
from huffman_service import HuffmanService

logger = logging.getLogger(__name__)

COMPRESSED_SUFFIX = ".o"
DECOMPRESSED_SUFFIX = ".d"


class Mode(enum.Enum):
    COMPRESS = "Compression"
    DECOMPRESS = "Decompression"

    def __str__(self):
        return self.value


@dataclass
class Config:
    input_file: str
    output_file: Optional[str] = None
    mode: Mode = Mode.COMPRESS
    verbose: bool = False

    def output_path(self) -> Path:
        if self.output_file:
            return Path(self.output_file)
        suffix = COMPRESSED_SUFFIX if self.mode is Mode.COMPRESS else DECOMPRESSED_SUFFIX
        return Path(self.input_file + suffix)


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(
        prog="huffman-codec",
        description="Compress a UTF-8 text file with Huffman coding, or restore it.",
    )
    parser.add_argument("input_file", help="File to compress or decompress")
    parser.add_argument(
        "-o",
        dest="output_file",
        metavar="PATH",
        default=None,
        help=f"Output path (default: input path + '{COMPRESSED_SUFFIX}', "
             f"or + '{DECOMPRESSED_SUFFIX}' with -d)",
    )
    parser.add_argument("-d", dest="decompress", action="store_true", help="Decompress instead of compress")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    return Config(
        input_file=args.input_file,
        output_file=args.output_file,
        mode=Mode.DECOMPRESS if args.decompress else Mode.COMPRESS,
        verbose=args.verbose,
    )


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
    )


def compress_file(service: HuffmanService, input_path: Path, output_path: Path) -> int:
    raw = input_path.read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DomainError(f"{input_path} is not UTF-8 text: {e}") from e

    compressed = service.compress(text)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(compressed)

    ratio = (len(compressed) / len(raw) * 100) if raw else 0
    logger.info(
        "%s -> %s: %d -> %d bytes (%.1f%%)",
        input_path, output_path, len(raw), len(compressed), ratio,
    )
    return len(compressed)


def decompress_file(service: HuffmanService, input_path: Path, output_path: Path) -> int:
    data = input_path.read_bytes()
    restored = service.decompress(data).encode("utf-8")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(restored)

    logger.info(
        "%s -> %s: %d -> %d bytes",
        input_path, output_path, len(data), len(restored),
    )
    return len(restored)


def run(config: Config) -> None:
    service = HuffmanService()
    input_path = Path(config.input_file)
    output_path = config.output_path()
    if config.mode is Mode.COMPRESS:
        compress_file(service, input_path, output_path)
    else:
        decompress_file(service, input_path, output_path)


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    setup_logging(config.verbose)

    try:
        run(config)
    except (HuffmanError, OSError) as e:
        print(f"{config.mode} error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
