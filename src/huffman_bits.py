# filename: huffman_bits.py

from bitarray import bitarray

from huffman_errors import DomainError, FormatError

# Most significant bit first within each byte, on both sides
BIT_ORDER = "big"


def pack_bits(data, table):
    """Concatenate the code of every symbol of ``data`` and pack it into bytes.

    The last byte is padded with zero bits. Returns (payload, bit_count).
    """
    if not data:
        return b"", 0
    missing = set(data) - table.keys()
    if missing:
        raise DomainError(
            f"symbols missing from the code table: {sorted(missing)!r}"
        )
    prefix_code = {symbol: bitarray(code, endian=BIT_ORDER) for symbol, code in table.items()}
    bits = bitarray(endian=BIT_ORDER)
    bits.encode(prefix_code, data)
    return bits.tobytes(), len(bits)


def payload_size(bit_count):
    return (bit_count + 7) // 8


def unpack_bits(payload, bit_count):
    expected = payload_size(bit_count)
    if len(payload) < expected:
        raise FormatError(
            f"truncated bitstream: {bit_count} bits need {expected} bytes, "
            f"found {len(payload)}"
        )
    if len(payload) > expected:
        raise FormatError(
            f"{len(payload) - expected} unexpected bytes after the "
            f"{bit_count}-bit stream"
        )
    bits = bitarray(endian=BIT_ORDER)
    bits.frombytes(bytes(payload))
    # Drop the pad bits of the final byte
    del bits[bit_count:]
    return bits
