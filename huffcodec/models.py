"""
models.py

The shared objects used in the huffcodec.

"""


from typing import Any, Dict, Iterator, List, Optional, Union


class Leaf:
    """
    Terminal node of a Huffman tree, labelled by a symbol and its frequency.
    """
    def __init__(self, symbol: Any, frequency: int) -> None:
        self.symbol: Any = symbol
        self.frequency: int = frequency

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Leaf):
            return self.symbol == other.symbol and self.frequency == other.frequency
        return False

    def __repr__(self) -> str:
        return f"Leaf({self.symbol!r}, {self.frequency})"


class Branch:
    """
    Internal node of a Huffman tree. The frequency is the sum of the subtree's
    leaf frequencies, or 0 for a tree rebuilt from a code map.

    Children may be None only while a tree is being reconstructed.
    """
    def __init__(self, frequency: int,
                 left: Optional["Node"] = None,
                 right: Optional["Node"] = None) -> None:
        self.frequency: int = frequency
        self.left: Optional[Node] = left
        self.right: Optional[Node] = right

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Branch):
            return (self.frequency == other.frequency
                    and self.left == other.left
                    and self.right == other.right)
        return False

    def __repr__(self) -> str:
        return f"Branch({self.frequency}, {self.left!r}, {self.right!r})"


Node = Union[Leaf, Branch]


def is_leaf(node: Optional[Node]) -> bool:
    return isinstance(node, Leaf)


def iter_leaves(tree: Optional[Node]) -> Iterator[Leaf]:
    """Yield the leaves of a tree from left to right."""
    stack = [tree]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        if is_leaf(node):
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)


def tree_depth(tree: Optional[Node]) -> int:
    """Return the depth of the deepest leaf, 0 for a lone leaf or an empty tree."""
    depth = 0
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if node is None:
            continue
        if is_leaf(node):
            depth = max(depth, level)
        else:
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
    return depth


def format_bits(bits: List[bool]) -> str:
    """Render a bit path as a string of '0' (left) and '1' (right)."""
    return ''.join('1' if bit else '0' for bit in bits)


def parse_bits(text: str) -> List[bool]:
    """Parse a string of '0' and '1' characters into a bit path."""
    bits = []
    for char in text:
        if char == '0':
            bits.append(False)
        elif char == '1':
            bits.append(True)
        else:
            raise ValueError(f"Bit strings may only contain '0' and '1', got {char!r}")
    return bits


class CodeMap(dict):
    """
    Symbol to bit path mapping. text is set when the encoded data was a str,
    so decoding can hand back a str instead of a list of symbols.
    """
    def __init__(self, codes: Optional[Dict[Any, List[bool]]] = None, text: bool = False) -> None:
        super().__init__(codes or {})
        self.text: bool = text

    def __repr__(self) -> str:
        return f"CodeMap({dict.__repr__(self)}, text={self.text})"


class HuffmanCoding:
    """
    The result of encoding: the code map needed for decoding and the encoded data.
    """
    def __init__(self, code: Dict[Any, List[bool]], data: List[bool]) -> None:
        self.code: Dict[Any, List[bool]] = code
        self.data: List[bool] = data

    @property
    def bit_length(self) -> int:
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HuffmanCoding):
            return self.code == other.code and self.data == other.data
        return False

    def __str__(self) -> str:
        codes = ', '.join(f"{symbol!r}: {format_bits(bits)}" for symbol, bits in self.code.items())
        return f"[{{{codes}}}, {format_bits(self.data)}]"

    def __repr__(self) -> str:
        return f"HuffmanCoding({self.code!r}, {self.data!r})"
