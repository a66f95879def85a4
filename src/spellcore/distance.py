from __future__ import annotations
from typing import List


def distance_matrix(a: str, b: str) -> List[List[int]]:
    """
    Full (len(a)+1) x (len(b)+1) edit-distance table.
    Row 0 / column 0 hold the index values; every other cell is the cheapest of
    delete, insert and substitute (substitution is free when the letters match).
    """
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        ai = a[i - 1]
        for j in range(1, n + 1):
            cost = 0 if ai == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,         # delete
                dp[i][j - 1] + 1,         # insert
                dp[i - 1][j - 1] + cost,  # substitute
            )
    return dp


def distance(a: str, b: str) -> int:
    """Levenshtein distance with unit costs; 0 for identical strings."""
    if a == b:
        return 0
    return distance_matrix(a, b)[-1][-1]
