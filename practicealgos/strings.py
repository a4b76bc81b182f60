"""String problems: palindromes, sliding windows, brackets and postfix evaluation."""

from __future__ import annotations

import operator
from collections import Counter
from itertools import combinations
from typing import Callable, Dict, Iterator, List, Sequence


def is_palindrome(s: str) -> bool:
    """Whether s reads the same both ways, ignoring case and non-ASCII-alphanumerics."""
    cleaned = [c for c in s.lower() if c.isascii() and c.isalnum()]
    return cleaned == cleaned[::-1]


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: Dict[str, int] = {}
    start = best = 0
    for index, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = index
        best = max(best, index - start + 1)
    return best


def remove_palindrome_sub(s: str) -> int:
    """Fewest palindromic subsequences to remove to empty a string of a's and b's.

    A palindrome goes in one step; otherwise all a's form one palindromic
    subsequence and all b's another, so two steps always suffice.
    """
    half = len(s) // 2
    for front, back in zip(s[:half], reversed(s)):
        if front != back:
            return 2
    return 1


def max_word_length_product(words: Sequence[str]) -> int:
    """Largest product of lengths of two words sharing no letter (0 if none)."""
    letters = [(len(w), frozenset(w)) for w in words]
    return max(
        (la * lb for (la, sa), (lb, sb) in combinations(letters, 2) if not sa & sb),
        default=0,
    )


def character_replacement(s: str, k: int) -> int:
    """Longest run of one repeated character after replacing at most k characters.

    Returns -1 for an empty string.
    """
    counts: Counter[str] = Counter()
    best = -1
    left = top = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        top = max(top, counts[ch])
        if right - left + 1 - top > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def generate_parenthesis(n: int) -> List[str]:
    """All balanced strings of n bracket pairs, in lexicographic order."""

    def build(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if opened == 0 and closed == 0:
            yield prefix
            return
        if opened > 0:
            yield from build(prefix + "(", opened - 1, closed)
        if opened < closed:
            yield from build(prefix + ")", opened, closed - 1)

    return list(build("", n, n))


def check_inclusion(s1: str, s2: str) -> bool:
    """Whether some permutation of a non-empty s1 is a substring of s2."""
    width = len(s1)
    if width == 0 or width > len(s2):
        return False
    need = Counter(s1)
    window = Counter(s2[:width])
    if window == need:
        return True
    for incoming, outgoing in zip(s2[width:], s2):
        window[incoming] += 1
        window[outgoing] -= 1
        if window[outgoing] == 0:
            del window[outgoing]
        if window == need:
            return True
    return False


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: Dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Sequence[str]) -> int:
    """Evaluate integer postfix notation; division truncates toward zero."""
    stack: List[int] = []
    for token in tokens:
        op = _OPERATORS.get(token)
        if op is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(op(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]