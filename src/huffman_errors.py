# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every failure raised by the codec."""


class FormatError(HuffmanError, ValueError):
    """The header or the packed stream is malformed."""


class DomainError(HuffmanError, ValueError):
    """The input lies outside what the codec can encode."""
