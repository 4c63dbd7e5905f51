"""
Array primitives for list-valued form fields.

Every function returns a new list and leaves its input untouched.
Indices are checked explicitly: negative or out-of-range positions
raise IndexError instead of wrapping around or doing nothing.
"""

from typing import Any, Sequence


def _check_index(seq: Sequence[Any], index: int, allow_end: bool = False) -> None:
    """Raise IndexError unless 0 <= index < len(seq) (or <= with allow_end)."""
    upper = len(seq) if allow_end else len(seq) - 1
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"Index must be an int, got {type(index).__name__}")
    if index < 0 or index > upper:
        raise IndexError(f"Index {index} out of range for sequence of length {len(seq)}")


def copy_array(seq: Sequence[Any]) -> list[Any]:
    """Return a shallow copy of the sequence as a list."""
    return list(seq)


def swap(seq: Sequence[Any], index_a: int, index_b: int) -> list[Any]:
    """Return a copy with the elements at index_a and index_b exchanged."""
    _check_index(seq, index_a)
    _check_index(seq, index_b)
    result = copy_array(seq)
    result[index_a], result[index_b] = result[index_b], result[index_a]
    return result


def move(seq: Sequence[Any], from_index: int, to_index: int) -> list[Any]:
    """Return a copy with one element relocated from from_index to to_index.

    The relative order of all other elements is preserved.
    """
    _check_index(seq, from_index)
    _check_index(seq, to_index)
    result = copy_array(seq)
    item = result.pop(from_index)
    result.insert(to_index, item)
    return result


def insert(seq: Sequence[Any], index: int, value: Any) -> list[Any]:
    """Return a copy with value inserted at index (index == len appends)."""
    _check_index(seq, index, allow_end=True)
    result = copy_array(seq)
    result.insert(index, value)
    return result


def replace(seq: Sequence[Any], index: int, value: Any) -> list[Any]:
    """Return a copy with the element at index replaced by value."""
    _check_index(seq, index)
    result = copy_array(seq)
    result[index] = value
    return result


def remove(seq: Sequence[Any], index: int) -> list[Any]:
    """Return a copy with the element at index removed."""
    _check_index(seq, index)
    result = copy_array(seq)
    del result[index]
    return result
