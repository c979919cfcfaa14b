# filename: huffman_service.py

import logging

from huffman_bits import pack_bits, unpack_bits
from huffman_core import HuffmanLogic, count_leaves
from huffman_errors import DomainError
from huffman_header import parse_header, serialize_header

logger = logging.getLogger(__name__)


class HuffmanService:
    def __init__(self):
        self.logic = HuffmanLogic()

    def encode_table(self, data):
        """Build the code table for ``data``; empty input gives an empty table."""
        tree = self.logic.build_tree(data)
        if tree is None:
            return {}
        logger.debug(
            "built tree: %d leaves, root frequency %d",
            count_leaves(tree), tree.frequency,
        )
        return self.logic.generate_codes(tree)

    def compress(self, data):
        if not isinstance(data, str):
            raise DomainError(f"expected text to compress, got {type(data).__name__}")
        try:
            data.encode("utf-8")
        except UnicodeEncodeError as e:
            raise DomainError(f"text cannot be encoded as UTF-8: {e}") from e
        codes = self.encode_table(data)
        payload, bit_count = pack_bits(data, codes)
        header = serialize_header(codes, bit_count)
        logger.debug(
            "compressed %d symbols: %d table entries, %d bits, header %d bytes",
            len(data), len(codes), bit_count, len(header),
        )
        return header + payload

    def decompress(self, data):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise DomainError(f"expected bytes to decompress, got {type(data).__name__}")
        data = bytes(data)
        if not data:
            return ""
        header, offset = parse_header(data)
        tree = self.logic.rebuild_tree(header.table)
        bits = unpack_bits(data[offset:], header.bit_count)
        decoded = self.logic.decode_bits(tree, bits)
        logger.debug(
            "decompressed %d bits into %d symbols using %d table entries",
            header.bit_count, len(decoded), header.entry_count,
        )
        return decoded


def compress_text(text):
    return HuffmanService().compress(text)


def decompress_text(data):
    return HuffmanService().decompress(data)
