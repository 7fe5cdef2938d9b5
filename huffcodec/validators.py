"""
validators.py

Shared codes for input validation in huffcodec.
"""


from collections import abc
from typing import Any, Dict, Sequence


class InvalidCodeError(ValueError):
    """Raised when a code map is not a usable prefix code."""


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_bits(bits: Any, name: str) -> None:
    """Validate that bits is a sequence of booleans."""
    if isinstance(bits, (str, bytes)) or not isinstance(bits, abc.Sequence):
        raise ValueError(f"{name} must be a sequence of booleans")
    for bit in bits:
        if not isinstance(bit, bool):
            raise ValueError(f"{name} must only contain booleans, got {bit!r}")


def validate_code_map(code: Dict[Any, Sequence[bool]]) -> None:
    """
    Validate that a code map holds sequences of booleans and that no code is a
    prefix of another.
    """
    validate_type(code, "code", dict)
    for symbol, bits in code.items():
        validate_bits(bits, f"code[{symbol!r}]")

    symbols = list(code.keys())
    # Symbols need not be orderable, so sort on (path, position).
    paths = sorted((tuple(bits), index) for index, bits in enumerate(code.values()))
    # Anything a code prefixes sorts directly after it.
    for (first, i), (second, j) in zip(paths, paths[1:]):
        if second[:len(first)] == first:
            raise InvalidCodeError(
                f"Code for {symbols[i]!r} is a prefix of the code for {symbols[j]!r}")
