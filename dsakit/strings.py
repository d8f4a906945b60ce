"""String algorithms: decrement, distinct subsequences, digit search, LCS, word reversal."""

from __future__ import annotations

MOD = 10**9 + 7


def smallest_string(s: str) -> str:
    """Return the smallest string reachable by shifting one non-empty substring back by one letter.

    Leading 'a's are skipped and the following run of non-'a' letters is
    decremented; a string of only 'a's gets its last letter turned into 'z'.
    """
    if not s:
        raise ValueError("string must not be empty")
    start = next((i for i, ch in enumerate(s) if ch != "a"), None)
    if start is None:
        return s[:-1] + "z"
    end = s.find("a", start)
    if end == -1:
        end = len(s)
    shifted = "".join(chr(ord(ch) - 1) for ch in s[start:end])
    return s[:start] + shifted + s[end:]


def distinct_subsequences(s: str) -> int:
    """Count the distinct subsequences of ``s``, the empty one included, modulo 1e9+7."""
    counts = [1]
    last: dict[str, int] = {}
    for i, ch in enumerate(s):
        value = counts[-1] * 2
        if ch in last:
            value -= counts[last[ch]]
        counts.append(value % MOD)
        last[ch] = i
    return counts[-1]


def number_search(text: str) -> int:
    """Sum the digits in ``text``, divide by its letter count, and round half up."""
    letters = 0
    total = 0
    for ch in text:
        if "a" <= ch <= "z" or "A" <= ch <= "Z":
            letters += 1
        elif "0" <= ch <= "9":
            total += int(ch)
    if letters == 0:
        raise ValueError("text holds no letters")
    return (2 * total + letters) // (2 * letters)


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    following = [0] * (len(text2) + 1)
    for a in reversed(text1):
        current = [0] * (len(text2) + 1)
        for j in range(len(text2) - 1, -1, -1):
            if a == text2[j]:
                current[j] = 1 + following[j + 1]
            else:
                current[j] = max(current[j + 1], following[j])
        following = current
    return following[0]


def reverse_words(s: str) -> str:
    """Reverse the letters of every space-separated word, keeping word order."""
    return " ".join(word[::-1] for word in s.split(" "))