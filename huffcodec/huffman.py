"""
huffman.py

Huffman coding of symbol sequences: frequency counting, tree construction,
code extraction, encoding, tree reconstruction from a code map and decoding.
"""


from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from . import settings
from .models import Branch, CodeMap, HuffmanCoding, Leaf, Node, is_leaf
from .pqueue import PriorityQueue
from .logger import (
    Logger,
    FrequencyTableLog,
    CodingLog,
    TreeMergeProgressStep,
    CodingProgressStep,
    DecodingProgressStep,
)
from .validators import validate_bits, validate_code_map


class MalformedDataError(ValueError):
    """Raised when encoded data does not follow the paths of its code map."""


def frequency_table(symbols: Optional[Sequence[Any]],
                    logger: Optional[Logger] = None) -> Optional[Dict[Any, int]]:
    """
    Count how many times each distinct symbol occurs.

    Args:
        symbols (Optional[Sequence[Any]]): The input sequence, e.g. a string.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        Optional[Dict[Any, int]]: Symbol counts in order of first occurrence,
        or None when there is nothing to count.
    """
    if symbols is None or len(symbols) == 0:
        return None
    freq_dict = defaultdict(int)
    for sym in symbols:
        freq_dict[sym] += 1
    table = dict(freq_dict)
    if logger is not None:
        logger.log(FrequencyTableLog(len(table), len(symbols)))
    return table


def tree_from_frequency_table(table: Optional[Dict[Any, int]],
                              sort_symbols: Optional[bool] = None,
                              logger: Optional[Logger] = None) -> Optional[Node]:
    """
    Build a Huffman tree by repeatedly merging the two lowest-frequency nodes.

    The first node dequeued becomes the left child of the merged branch. Ties
    between equal frequencies are resolved by enqueue order, so the shape of
    the tree depends on the iteration order of the table unless sort_symbols
    is set.

    Args:
        table (Optional[Dict[Any, int]]): Symbol frequencies.
        sort_symbols (Optional[bool]): Enqueue leaves in ascending symbol order.
            Defaults to settings.SORT_SYMBOLS.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        Optional[Node]: The tree, a lone Leaf for a single symbol, or None
        when there is no table.
    """
    if table is None:
        return None
    if sort_symbols is None:
        sort_symbols = settings.SORT_SYMBOLS

    entries = table.items()
    if sort_symbols:
        entries = sorted(entries, key=lambda entry: entry[0])

    queue = PriorityQueue()
    for symbol, frequency in entries:
        queue.enqueue(Leaf(symbol, frequency))

    total_merges = queue.size() - 1
    while queue.size() > 1:
        left = queue.dequeue()
        right = queue.dequeue()
        queue.enqueue(Branch(left.frequency + right.frequency, left, right))
        if logger is not None and logger.tracks_progress():
            logger.log(TreeMergeProgressStep("Merging tree nodes", total_merges))
    return queue.dequeue()


def build_code(tree: Optional[Node]) -> Dict[Any, List[bool]]:
    """
    Map every symbol of a tree to its root-to-leaf path, False for left and
    True for right. A lone leaf gets the empty path.
    """
    codes = {}

    def traverse(node: Optional[Node], path: Tuple[bool, ...]) -> None:
        if node is None:
            return
        if is_leaf(node):
            codes[node.symbol] = list(path)
        else:
            traverse(node.left, path + (False,))
            traverse(node.right, path + (True,))

    traverse(tree, ())
    return codes


def encode(symbols: Optional[Sequence[Any]],
           logger: Optional[Logger] = None) -> Optional[HuffmanCoding]:
    """
    Huffman-encode a sequence of symbols.

    Args:
        symbols (Optional[Sequence[Any]]): The data to encode.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        Optional[HuffmanCoding]: The code map and the encoded bits, or None
        for empty input.
    """
    table = frequency_table(symbols, logger)
    if table is None:
        return None
    tree = tree_from_frequency_table(table, logger=logger)
    code = CodeMap(build_code(tree), text=isinstance(symbols, str))

    data: List[bool] = []
    for symbol in symbols:
        data.extend(code[symbol])
        if logger is not None and logger.tracks_progress():
            logger.log(CodingProgressStep("Encoding symbols", len(symbols)))

    if logger is not None:
        logger.log(CodingLog(len(symbols), len(data)))
    return HuffmanCoding(code, data)


def tree_from_code(code: Dict[Any, Sequence[bool]]) -> Branch:
    """
    Rebuild the structure of a Huffman tree from a code map. Every node gets
    the frequency 0.

    A code map with a single, empty code yields a root branch with no children.

    Raises:
        InvalidCodeError: If the code map is not prefix-free.
    """
    validate_code_map(code)

    root = Branch(0)
    for symbol, bits in code.items():
        node = root
        last = len(bits) - 1
        for i, bit in enumerate(bits):
            if not bit:
                if i == last:
                    node.left = Leaf(symbol, 0)
                elif node.left is None:
                    node.left = Branch(0)
                node = node.left
            else:
                if i == last:
                    node.right = Leaf(symbol, 0)
                elif node.right is None:
                    node.right = Branch(0)
                node = node.right
    return root


def decode(code: Dict[Any, Sequence[bool]], data: Sequence[bool],
           logger: Optional[Logger] = None,
           as_str: Optional[bool] = None) -> Union[str, List[Any]]:
    """
    Decode Huffman-encoded data with the code map it was encoded with.

    Args:
        code (Dict[Any, Sequence[bool]]): The code map.
        data (Sequence[bool]): The encoded bits.
        logger (Optional[Logger]): Logger instance for logging.
        as_str (Optional[bool]): Join the decoded symbols into a str. Defaults to
            the text flag of a CodeMap from encode, or for a plain dict to
            whether every symbol is a single character.

    Returns:
        Union[str, List[Any]]: The decoded string or the list of decoded symbols.

    Raises:
        MalformedDataError: If the data leaves the tree or stops part-way
            through a code.
    """
    validate_bits(data, "data")
    tree = tree_from_code(code)

    decoded: List[Any] = []
    node: Optional[Node] = tree
    for position, bit in enumerate(data):
        node = node.right if bit else node.left
        if node is None:
            raise MalformedDataError(
                f"Bit {position} of the data does not follow any code")
        if is_leaf(node):
            decoded.append(node.symbol)
            node = tree
        if logger is not None and logger.tracks_progress():
            logger.log(DecodingProgressStep("Decoding bits", len(data)))

    if node is not tree:
        raise MalformedDataError("Data ends part-way through a code")

    if as_str is None:
        if isinstance(code, CodeMap):
            as_str = code.text
        else:
            as_str = all(isinstance(symbol, str) and len(symbol) == 1 for symbol in code)
    if as_str:
        return ''.join(decoded)
    return decoded


def code_lengths(code: Dict[Any, List[bool]]) -> Dict[Any, int]:
    return {symbol: len(bits) for symbol, bits in code.items()}


def encoded_size(table: Dict[Any, int], code: Dict[Any, List[bool]]) -> int:
    """Number of bits needed to encode data with the given frequencies."""
    return sum(frequency * len(code[symbol]) for symbol, frequency in table.items())