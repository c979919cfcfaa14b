# filename: huffman_header.py
"""Textual header of a compressed artifact.

Layout (UTF-8):

    <entry count>\\n
    <symbol><code>\\n        one line per table entry, sorted by symbol
    <bit count>\\n

The newline symbol is written as the two characters backslash and ``n``.
The packed payload follows the bit-count line directly.
"""

from dataclasses import dataclass, field

from huffman_core import check_code
from huffman_errors import FormatError

NEWLINE_ESCAPE = "\\n"


@dataclass
class Header:
    entry_count: int
    table: dict = field(default_factory=dict)
    bit_count: int = 0


def serialize_header(table, bit_count):
    lines = [str(len(table))]
    for symbol in sorted(table):
        key = NEWLINE_ESCAPE if symbol == "\n" else symbol
        lines.append(key + table[symbol])
    lines.append(str(bit_count))
    return ("\n".join(lines) + "\n").encode("utf-8")


def _parse_count(line, what):
    # str.isdigit() would also accept non-ASCII digits
    if not line or not all("0" <= ch <= "9" for ch in line):
        raise FormatError(
            f"expected the {what} to be an unsigned decimal number, found {line[:40]!r}"
        )
    try:
        return int(line)
    except ValueError as e:
        # Overlong digit strings hit the interpreter's conversion limit
        raise FormatError(f"{what} has too many digits ({len(line)})") from e


def parse_entry(line):
    """Split one table line into (symbol, code)."""
    if not line:
        raise FormatError("empty code table entry")
    if line.startswith(NEWLINE_ESCAPE):
        symbol, code = "\n", line[len(NEWLINE_ESCAPE):]
    else:
        symbol, code = line[0], line[1:]
    check_code(symbol, code)
    return symbol, code


class _LineReader:
    def __init__(self, data):
        self.data = data
        self.pos = 0

    def read_line(self, what):
        end = self.data.find(b"\n", self.pos)
        if end < 0:
            raise FormatError(f"header truncated while reading the {what}")
        raw = self.data[self.pos:end]
        self.pos = end + 1
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"{what} is not valid UTF-8: {e}") from e


def parse_header(data):
    """Parse a header from the start of ``data``.

    Returns the Header and the offset of the first payload byte.
    """
    reader = _LineReader(data)
    entry_count = _parse_count(reader.read_line("entry count"), "entry count")

    table = {}
    for index in range(entry_count):
        try:
            line = reader.read_line(f"code table entry {index + 1}")
        except FormatError as e:
            raise FormatError(
                f"declared {entry_count} code table entries, found {index}"
            ) from e
        symbol, code = parse_entry(line)
        table[symbol] = code

    if len(table) != entry_count:
        raise FormatError(
            f"declared {entry_count} code table entries, parsed "
            f"{len(table)} distinct symbols"
        )

    bit_count = _parse_count(reader.read_line("bit count"), "bit count")
    if not table and bit_count:
        raise FormatError(f"empty code table but {bit_count} encoded bits")

    return Header(entry_count, table, bit_count), reader.pos
