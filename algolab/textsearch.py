"""String algorithms: Rabin-Karp pattern search and longest common subsequence."""

from __future__ import annotations

BASE = 256
PRIME = 101


def rabin_karp_search(pattern: str, text: str) -> list[int]:
    """Return every index of ``text`` at which ``pattern`` starts."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    m, n = len(pattern), len(text)
    if m > n:
        return []

    high = pow(BASE, m - 1, PRIME)
    pattern_hash = window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (BASE * pattern_hash + ord(p_char)) % PRIME
        window_hash = (BASE * window_hash + ord(t_char)) % PRIME

    matches = []
    for i in range(n - m + 1):
        if pattern_hash == window_hash and text[i : i + m] == pattern:
            matches.append(i)
        if i < n - m:
            window_hash = (BASE * (window_hash - ord(text[i]) * high) + ord(text[i + m])) % PRIME
    return matches


def lcs_length(first: str, second: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]