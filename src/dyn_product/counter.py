"""Mixed-radix counter used to walk the cartesian product."""

from typing import MutableSequence, Sequence


def countup(digits: MutableSequence[int], rows: Sequence) -> None:
    """Advance the counter to the next combination, odometer style.

    The last digit moves fastest. When a digit reaches the length of its row
    it wraps to 0 and carries into the digit on its left. The first digit
    never wraps: running past the length of the first row is how the
    enumerator knows it is done.

    Args:
        digits: One index per row, modified in place
        rows: The rows being enumerated, used only for their lengths

    Raises:
        ValueError: If the counter has no digits
    """
    if not digits:
        raise ValueError("Cannot advance an empty counter")

    last = len(digits) - 1
    digits[last] += 1

    for j in range(last, 0, -1):
        if digits[j] >= len(rows[j]):
            digits[j] = 0
            digits[j - 1] += 1
        else:
            break
