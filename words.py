from __future__ import annotations


def permutation_distance(first: str, second: str, limit: int) -> int:
    """Count the positions at which two equal-length words differ.

    Counting stops once it passes ``limit``: the builder only needs to know
    that such a pair is rejected, so the result is then ``limit + 1``.
    """
    if len(first) != len(second):
        raise ValueError(
            f"Words {first!r} and {second!r} differ in length."
        )

    changes = 0
    for a, b in zip(first, second):
        if a != b:
            changes += 1
            if changes > limit:
                break
    return changes


def same_word(candidate: str, query: str) -> bool:
    return candidate == query
