"""
huffcodec: A Python library for Huffman coding of symbol sequences.
"""

from .models import (
    Leaf,
    Branch,
    Node,
    CodeMap,
    HuffmanCoding,
    is_leaf,
    iter_leaves,
    tree_depth,
    format_bits,
    parse_bits,
)

from .pqueue import PriorityQueue

from .huffman import (
    MalformedDataError,
    frequency_table,
    tree_from_frequency_table,
    build_code,
    encode,
    tree_from_code,
    decode,
    code_lengths,
    encoded_size,
)

from .statistics import (
    CodingStatistics,
    entropy,
    average_code_length,
    kraft_sum,
)

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyTableLog,
    CodingLog,
    TreeMergeProgressStep,
    CodingProgressStep,
    DecodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "Leaf",
    "Branch",
    "Node",
    "CodeMap",
    "HuffmanCoding",
    "is_leaf",
    "iter_leaves",
    "tree_depth",
    "format_bits",
    "parse_bits",

    "PriorityQueue",

    "MalformedDataError",
    "frequency_table",
    "tree_from_frequency_table",
    "build_code",
    "encode",
    "tree_from_code",
    "decode",
    "code_lengths",
    "encoded_size",

    "CodingStatistics",
    "entropy",
    "average_code_length",
    "kraft_sum",

    "Logger",
    "Log",
    "LogLevel",
    "FrequencyTableLog",
    "CodingLog",
    "TreeMergeProgressStep",
    "CodingProgressStep",
    "DecodingProgressStep",

    "InvalidCodeError",
    "validate_type",
    "validate_bits",
    "validate_code_map",
]
