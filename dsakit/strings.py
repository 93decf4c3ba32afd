"""String problems: longest common subsequence and palindromes from word lists."""

from __future__ import annotations

from collections.abc import Iterable


def longest_common_subsequence(first: str, second: str) -> str:
    """Return one longest common subsequence of two strings.

    Its length is the length of the longest common subsequence. When the
    table allows a choice while walking back, the shorter ``second`` prefix
    is preferred unless dropping a character of ``first`` keeps a strictly
    longer match.
    """
    rows, cols = len(first), len(second)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i, left_char in enumerate(first, start=1):
        above, current = table[i - 1], table[i]
        for j, right_char in enumerate(second, start=1):
            if left_char == right_char:
                current[j] = above[j - 1] + 1
            else:
                current[j] = max(above[j], current[j - 1])

    picked: list[str] = []
    i, j = rows, cols
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            picked.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))


def can_make_palindrome(words: Iterable[str]) -> bool:
    """Tell whether equal-length words can be concatenated in some order into a palindrome.

    That holds exactly when the multiset of words equals the multiset of
    their reversals.
    """
    items = list(words)
    return sorted(items) == sorted(word[::-1] for word in items)