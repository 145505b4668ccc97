import heapq
from functools import total_ordering
from typing import Dict, Optional

__all__ = [
    "HuffmanNode",
    "HuffmanCoder",
    "CodeTableUnavailableError",
    "build_frequency_table",
    "build_huffman_tree",
    "build_code_table",
    "encode_text",
    "decode_text",
]


class CodeTableUnavailableError(RuntimeError):
    """Raised when encode/decode is attempted before the coder is built."""

    def __init__(self, message: str = "Code table is not available"):
        super().__init__(message)


@total_ordering
class HuffmanNode: # Node for Huffman tree
    __slots__ = ("_character", "_frequency", "_left", "_right")

    def __init__(self, character, frequency, left=None, right=None):
        self._character = character # str of length 1, or None for internal nodes
        self._frequency = frequency # leaf: occurrence count, internal: sum of children
        self._left = left
        self._right = right

    @property
    def character(self) -> Optional[str]:
        return self._character

    @property
    def frequency(self) -> int:
        return self._frequency

    @property
    def left(self) -> Optional["HuffmanNode"]:
        return self._left

    @property
    def right(self) -> Optional["HuffmanNode"]:
        return self._right

    @property
    def is_leaf(self) -> bool:
        return self._character is not None

    # Nodes order by frequency only, so heapq keeps the min-heap property on it
    def __lt__(self, other):
        if not isinstance(other, HuffmanNode):
            return NotImplemented
        return self._frequency < other._frequency

    def __eq__(self, other):
        if not isinstance(other, HuffmanNode):
            return NotImplemented
        return self._frequency == other._frequency

    __hash__ = None

    def __repr__(self):
        left_character = self._left.character if self._left is not None else None
        right_character = self._right.character if self._right is not None else None
        return "(val: %r, f: %d, l: %r, r: %r)" % (
            self._character, self._frequency, left_character, right_character)


def build_frequency_table(text: str) -> Dict[str, int]: # text -> dict of character -> count
    frequency_table: Dict[str, int] = {}
    for c in text:
        frequency_table[c] = frequency_table.get(c, 0) + 1
    return frequency_table


def build_huffman_tree(frequency_table: Dict[str, int]) -> Optional[HuffmanNode]:
    """
    Greedy Huffman merge over a frequency table.

    Returns the root of the tree, or None for an empty table. A table with a
    single character yields that leaf as the root.
    """
    priority_queue = [HuffmanNode(character, frequency) for character, frequency in frequency_table.items()]
    heapq.heapify(priority_queue)

    while len(priority_queue) > 1:
        left = heapq.heappop(priority_queue)
        right = heapq.heappop(priority_queue)
        merged_node = HuffmanNode(None, left.frequency + right.frequency, left, right) # internal node with combined frequency
        heapq.heappush(priority_queue, merged_node)

    return priority_queue[0] if priority_queue else None


def build_code_table(node: HuffmanNode, prefix: str = "", code_table: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """
    Walk the tree depth-first (left before right) and record the path to
    every leaf as its code. ``code_table`` is filled in place and returned.

    A root that is itself a leaf gets the empty code.
    """
    if code_table is None:
        code_table = {}

    stack = [(node, prefix)] # explicit stack, skewed trees can be deeper than the recursion limit
    while stack:
        current_node, code = stack.pop()

        # Leaf node -> assign code
        if current_node.character is not None:
            code_table[current_node.character] = code
            continue

        # right pushed first so the left subtree is visited first
        if current_node.right is not None:
            stack.append((current_node.right, code + "1"))
        if current_node.left is not None:
            stack.append((current_node.left, code + "0"))
    return code_table


def encode_text(text: str, code_table: Dict[str, str]) -> str:
    # characters without a code contribute no bits
    return "".join(code_table.get(c, "") for c in text)


def decode_text(encoded_text: str, huffman_tree: HuffmanNode) -> str:
    """
    Decode a string of '0'/'1' characters by walking ``huffman_tree``.

    Characters other than '0' and '1' are ignored, a bit pointing at a
    missing child leaves the walk where it is, and trailing bits that never
    reach a leaf are dropped.
    """
    decoded = []
    current_node = huffman_tree
    for bit in encoded_text:
        if bit == "0":
            if current_node.left is not None:
                current_node = current_node.left
        elif bit == "1":
            if current_node.right is not None:
                current_node = current_node.right

        if current_node.character is not None: # reached a leaf
            decoded.append(current_node.character)
            current_node = huffman_tree # reset to the root for the next character

    return "".join(decoded)


class HuffmanCoder:
    """
    Holds the Huffman tree and code table built from one corpus.

    Usage::

        coder = HuffmanCoder()
        coder.build("heellllooo")
        bits = coder.encode("hello")    # '1101110010'
        coder.decode(bits)              # 'hello'

    ``tree`` and ``code_table`` can also be assigned directly to reuse a
    precomputed tree or table. Nothing keeps the two consistent when they are
    set that way; ``build`` is the only operation that sets both.
    """

    def __init__(self):
        self._tree: Optional[HuffmanNode] = None
        self._code_table: Optional[Dict[str, str]] = None

    @property
    def tree(self) -> Optional[HuffmanNode]:
        return self._tree

    @tree.setter
    def tree(self, tree: Optional[HuffmanNode]) -> None:
        self._tree = tree

    @property
    def code_table(self) -> Optional[Dict[str, str]]:
        return self._code_table

    @code_table.setter
    def code_table(self, code_table: Optional[Dict[str, str]]) -> None:
        self._code_table = code_table

    @property
    def is_built(self) -> bool:
        return self._tree is not None and self._code_table is not None

    def build(self, text: str) -> None:
        """Build the tree and code table for ``text``, replacing any previous ones."""
        tree = build_huffman_tree(build_frequency_table(text))
        if tree is None:
            # empty corpus: nothing to encode with
            self._tree = None
            self._code_table = None
            return

        self._tree = tree
        self._code_table = build_code_table(tree)

    def encode(self, text: str) -> str:
        if self._code_table is None:
            raise CodeTableUnavailableError()
        return encode_text(text, self._code_table)

    def decode(self, encoded_text: str) -> str:
        if self._tree is None:
            raise CodeTableUnavailableError()
        return decode_text(encoded_text, self._tree)
