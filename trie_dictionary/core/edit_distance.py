# edit_distance.py
# Levenshtein distance helpers for typo-tolerant lookup.
# Unit cost for insertion, deletion and substitution; case-sensitive; no transposition.
# - levenshtein() is the plain two-row DP.
# - levenshtein_with_cutoff() bails out early once the distance exceeds max_dist.
# - next_row() exposes a single DP row step so the trie walk can carry one row per branch.

from typing import List, Optional, Sequence


def next_row(prev: Sequence[int], ch: str, target: str) -> List[int]:
    """
    Extend a DP row by one character.
    prev is the row for some source prefix against every prefix of target;
    the returned row is for that source prefix + ch.
    """
    curr = [prev[0] + 1]
    for j in range(1, len(target) + 1):
        ins = curr[j - 1] + 1
        delete = prev[j] + 1
        replace = prev[j - 1] + (0 if ch == target[j - 1] else 1)
        val = ins if ins < delete else delete
        if replace < val:
            val = replace
        curr.append(val)
    return curr


def levenshtein_with_cutoff(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Compute Levenshtein distance with optional early exit when distance
    exceeds max_dist. Any distance above max_dist is reported as max_dist + 1.
    """
    if a == b:
        return 0

    # ensure a is the longer string so the row is the short one
    if len(a) < len(b):
        a, b = b, a

    la, lb = len(a), len(b)

    if max_dist is not None and la - lb > max_dist:
        return max_dist + 1

    prev = list(range(lb + 1))
    for i in range(1, la + 1):
        curr = next_row(prev, a[i - 1], b)
        # row minimum never decreases further down, so stop once it is out of range
        if max_dist is not None and min(curr) > max_dist:
            return max_dist + 1
        prev = curr
    if max_dist is not None and prev[-1] > max_dist:
        return max_dist + 1
    return prev[-1]


def levenshtein(a: str, b: str) -> int:
    """Exact Levenshtein distance between a and b."""
    return levenshtein_with_cutoff(a, b)
