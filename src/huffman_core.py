# filename: huffman_core.py

import heapq
from collections import Counter

from huffman_errors import FormatError


class Leaf:
    def __init__(self, symbol, frequency=0, order=0):
        self.symbol = symbol
        self.frequency = frequency
        self.order = order

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.frequency})"


class Branch:
    def __init__(self, left=None, right=None, frequency=0, order=0):
        self.left = left
        self.right = right
        self.frequency = frequency
        self.order = order

    def __repr__(self):
        return f"Branch({self.left!r}, {self.right!r}, {self.frequency})"


def node_priority(node):
    """Ordering policy for the priority queue: lowest frequency first, then
    lowest order number, so ties never depend on dict iteration order."""
    return (node.frequency, node.order)


class MinHeap:
    """Smallest-first priority queue over heapq with an explicit key policy."""

    def __init__(self, key, items=()):
        self._key = key
        self._counter = 0
        self._heap = []
        for item in items:
            self.push(item)

    def __len__(self):
        return len(self._heap)

    def push(self, item):
        # The counter keeps heapq from ever comparing two items directly
        heapq.heappush(self._heap, (self._key(item), self._counter, item))
        self._counter += 1

    def pop(self):
        if not self._heap:
            raise IndexError("pop from an empty MinHeap")
        return heapq.heappop(self._heap)[2]


class HuffmanLogic:
    def count_frequencies(self, data):
        # Frequency analysis of the input symbols
        return Counter(data)

    def init_priority_queue(self, freqs):
        # Leaves are numbered in sorted symbol order for the tie-break
        leaves = [
            Leaf(symbol, freqs[symbol], order)
            for order, symbol in enumerate(sorted(freqs))
        ]
        return MinHeap(node_priority, leaves)

    def build_tree(self, data):
        freqs = self.count_frequencies(data)
        if not freqs:
            return None
        priority_queue = self.init_priority_queue(freqs)
        next_order = len(freqs)

        if len(priority_queue) == 1:
            only = priority_queue.pop()
            return Branch(only, None, only.frequency, next_order)

        # Iteratively merge nodes to form the binary tree
        while len(priority_queue) > 1:
            left = priority_queue.pop()
            right = priority_queue.pop()
            merged = Branch(left, right, left.frequency + right.frequency, next_order)
            next_order += 1
            priority_queue.push(merged)

        return priority_queue.pop()

    def generate_codes(self, node, current_code="", codes=None):
        if codes is None:
            codes = {}
        if node is None:
            return codes
        if isinstance(node, Leaf):
            if not current_code:
                raise FormatError(
                    f"cannot assign a code to the bare leaf {node.symbol!r}: "
                    "a tree needs at least one branch"
                )
            codes[node.symbol] = current_code
            return codes
        self.generate_codes(node.left, current_code + "0", codes)
        self.generate_codes(node.right, current_code + "1", codes)
        return codes

    def rebuild_tree(self, table):
        """Reconstruct a decoding tree from symbol -> code pairs.

        Frequencies are not recoverable from codes and are left at zero.
        Any code that collides with another one raises FormatError.
        """
        root = Branch()
        for symbol, code in table.items():
            check_code(symbol, code)
            node = root
            for position, bit in enumerate(code[:-1]):
                child = node.left if bit == "0" else node.right
                if child is None:
                    child = Branch()
                    if bit == "0":
                        node.left = child
                    else:
                        node.right = child
                elif isinstance(child, Leaf):
                    raise FormatError(
                        f"code {code!r} for {symbol!r} runs through the leaf "
                        f"{child.symbol!r} at {code[:position + 1]!r}"
                    )
                node = child

            last = code[-1]
            occupant = node.left if last == "0" else node.right
            if isinstance(occupant, Leaf):
                raise FormatError(
                    f"code {code!r} for {symbol!r} is already taken by "
                    f"{occupant.symbol!r}"
                )
            if occupant is not None:
                raise FormatError(
                    f"code {code!r} for {symbol!r} is a prefix of another code"
                )
            if last == "0":
                node.left = Leaf(symbol)
            else:
                node.right = Leaf(symbol)
        return root

    def decode_bits(self, root, bits):
        # bits: iterable of 0/1 integers, e.g. a bitarray
        decoded = []
        current_node = root
        consumed = 0
        for bit in bits:
            consumed += 1
            current_node = current_node.right if bit else current_node.left
            if current_node is None:
                raise FormatError(
                    f"bit {consumed} leads to a missing child: corrupted "
                    "stream or incomplete code table"
                )
            if isinstance(current_node, Leaf):
                decoded.append(current_node.symbol)
                current_node = root
        if current_node is not root:
            raise FormatError(
                f"bitstream ends in the middle of a code after {consumed} bits"
            )
        return "".join(decoded)


def check_code(symbol, code):
    if not code:
        raise FormatError(f"empty code for symbol {symbol!r}")
    invalid = set(code) - {"0", "1"}
    if invalid:
        raise FormatError(
            f"invalid code {code!r} for symbol {symbol!r}: expected only "
            f"'0' or '1', got {''.join(sorted(invalid))!r}"
        )


def count_leaves(node):
    if node is None:
        return 0
    if isinstance(node, Leaf):
        return 1
    return count_leaves(node.left) + count_leaves(node.right)
