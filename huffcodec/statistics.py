"""
statistics.py

Measures of how well a Huffman code fits the data it was built from.
"""


import math
from typing import Any, Dict, List

import numpy as np

from . import settings
from .huffman import code_lengths, encoded_size


def entropy(table: Dict[Any, int]) -> float:
    """Shannon entropy of the symbol distribution, in bits per symbol."""
    counts = np.array(list(table.values()), dtype=np.float64)
    if counts.size == 0:
        return 0.0
    probabilities = counts / counts.sum()
    return float(-np.sum(probabilities * np.log2(probabilities)))


def average_code_length(table: Dict[Any, int], code: Dict[Any, List[bool]]) -> float:
    """Expected number of bits per symbol under the given frequencies."""
    if not table:
        return 0.0
    symbols = list(table.keys())
    counts = np.array([table[s] for s in symbols], dtype=np.float64)
    lengths = np.array([len(code[s]) for s in symbols], dtype=np.float64)
    return float(np.dot(counts / counts.sum(), lengths))


def kraft_sum(code: Dict[Any, List[bool]]) -> float:
    """Sum of 2^-length over all codes; 1.0 for a complete prefix code."""
    lengths = np.array(list(code_lengths(code).values()), dtype=np.float64)
    return float(np.sum(np.exp2(-lengths)))


class CodingStatistics:
    """
    Summary of a code map applied to the data described by a frequency table.
    """
    def __init__(self, symbol_count: int, alphabet_size: int, entropy: float,
                 average_code_length: float, encoded_bits: int) -> None:
        self.symbol_count = symbol_count
        self.alphabet_size = alphabet_size
        self.entropy = entropy
        self.average_code_length = average_code_length
        self.encoded_bits = encoded_bits

    @classmethod
    def from_coding(cls, table: Dict[Any, int], code: Dict[Any, List[bool]]) -> "CodingStatistics":
        return cls(
            symbol_count=sum(table.values()),
            alphabet_size=len(table),
            entropy=entropy(table),
            average_code_length=average_code_length(table, code),
            encoded_bits=encoded_size(table, code),
        )

    @property
    def efficiency(self) -> float:
        if self.average_code_length == 0:
            return 1.0
        return self.entropy / self.average_code_length

    @property
    def fixed_length_bits(self) -> int:
        """Size of the data under a fixed-length code for the same alphabet."""
        if self.alphabet_size <= 1:
            return 0
        return self.symbol_count * math.ceil(math.log2(self.alphabet_size))

    @property
    def raw_bits(self) -> int:
        return self.symbol_count * settings.BITS_PER_SYMBOL

    @property
    def compression_ratio(self) -> float:
        if self.encoded_bits == 0:
            return math.inf
        return self.raw_bits / self.encoded_bits

    def __str__(self) -> str:
        return (f"Symbols: {self.symbol_count}, Alphabet: {self.alphabet_size}, "
                f"Entropy: {self.entropy:.4f}, Average code length: {self.average_code_length:.4f}, "
                f"Efficiency: {self.efficiency:.4f}, Encoded bits: {self.encoded_bits}, "
                f"Compression ratio: {self.compression_ratio:.4f}")

    def __repr__(self) -> str:
        return self.__str__()
