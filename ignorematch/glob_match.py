"""Glob matching for a single path component.

Supports ``?``, ``*``, bracket expressions (``[abc]``, ``[a-z]``, ``[!abc]``)
and backslash escapes. Patterns never fail to compile: an unterminated
bracket expression makes its ``[`` an ordinary character.

Matching backtracks iteratively over the most recent ``*`` only. Every other
token consumes exactly one character, so retrying from the last star is
enough and the work stays bounded by ``len(text) * len(pattern)``.
"""

from __future__ import annotations


def _match_bracket(pattern: str, start: int, char: str) -> tuple[bool, int] | None:
    """Match ``char`` against the bracket expression opening at ``start``.

    Returns ``(matched, next_index)``, or ``None`` if the expression has no
    closing ``]``.
    """
    end = len(pattern)
    pos = start + 1
    negate = False
    if pos < end and pattern[pos] == "!":
        negate = True
        pos += 1

    matched = False
    # a ']' right after the opening is a member, not the terminator
    if pos < end and pattern[pos] == "]":
        matched = char == "]"
        pos += 1

    while pos < end and pattern[pos] != "]":
        member = pattern[pos]
        if member == "\\" and pos + 1 < end:
            pos += 1
            member = pattern[pos]
        if pos + 2 < end and pattern[pos + 1] == "-" and pattern[pos + 2] != "]":
            if member <= char <= pattern[pos + 2]:
                matched = True
            pos += 3
            continue
        if member == char:
            matched = True
        pos += 1

    if pos >= end:
        return None
    return matched != negate, pos + 1


def _match_token(pattern: str, pos: int, char: str) -> tuple[bool, int]:
    token = pattern[pos]
    if token == "?":
        return True, pos + 1
    if token == "[":
        result = _match_bracket(pattern, pos, char)
        if result is not None:
            return result
        return char == "[", pos + 1
    if token == "\\" and pos + 1 < len(pattern):
        return char == pattern[pos + 1], pos + 2
    return char == token, pos + 1


def glob_match(text: str, pattern: str) -> bool:
    """Return whether the whole of ``text`` matches ``pattern``."""
    text_len = len(text)
    pattern_len = len(pattern)
    t = p = 0
    star_p = -1
    star_t = 0

    while t < text_len:
        if p < pattern_len and pattern[p] == "*":
            star_p = p
            star_t = t
            p += 1
            continue
        if p < pattern_len:
            ok, next_p = _match_token(pattern, p, text[t])
            if ok:
                t += 1
                p = next_p
                continue
        if star_p < 0:
            return False
        # let the last star swallow one more character and retry
        star_t += 1
        t = star_t
        p = star_p + 1

    while p < pattern_len and pattern[p] == "*":
        p += 1
    return p == pattern_len
