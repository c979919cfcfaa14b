import os
import sys

import pytest

# Add src to path
REPO_SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if REPO_SRC not in sys.path:
	sys.path.insert(0, REPO_SRC)

from huffman_bits import pack_bits, payload_size, unpack_bits
from huffman_errors import DomainError, FormatError

TABLE = {'a': '0', 'b': '10', 'c': '11'}


def test_pack_msb_first_with_zero_padding():
	payload, bit_count = pack_bits("abc", TABLE)
	# 0 10 11 -> 01011000
	assert payload == b"\x58"
	assert bit_count == 5


def test_pack_spans_multiple_bytes():
	payload, bit_count = pack_bits("cccca", TABLE)
	assert payload == b"\xff\x00"
	assert bit_count == 9


def test_pack_empty_input():
	assert pack_bits("", {}) == (b"", 0)


def test_pack_unknown_symbol():
	with pytest.raises(DomainError):
		pack_bits("abd", TABLE)


def test_unpack_drops_pad_bits():
	bits = unpack_bits(b"\x58", 5)
	assert bits.to01() == "01011"


def test_unpack_exact_byte_boundary():
	assert unpack_bits(b"\xa5", 8).to01() == "10100101"


def test_unpack_truncated_stream():
	with pytest.raises(FormatError, match="truncated"):
		unpack_bits(b"\xff", 9)


def test_unpack_trailing_bytes():
	with pytest.raises(FormatError):
		unpack_bits(b"\x58\x00", 5)


def test_payload_size():
	assert payload_size(0) == 0
	assert payload_size(1) == 1
	assert payload_size(8) == 1
	assert payload_size(9) == 2
