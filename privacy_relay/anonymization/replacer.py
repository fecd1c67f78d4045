"""Single-pass, longest-match-first multi-pattern substitution.

All search strings are compiled into one regex alternation ordered by
descending length. At every position the regex engine tries the longest
candidate first, and replaced text is never rescanned, so "Employee AA" is
never corrupted by the shorter "Employee A".
"""

from __future__ import annotations

import re
from collections.abc import Mapping


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _edge_guarded(term: str, whole_words: bool, forbid_after: str | None) -> str:
    """Escape *term*, optionally forbidding it from starting or ending inside a word."""
    pattern = re.escape(term)
    if whole_words:
        if _is_word_char(term[0]):
            pattern = r"(?<!\w)" + pattern
        if _is_word_char(term[-1]):
            pattern = pattern + r"(?!\w)"
    elif forbid_after:
        pattern = pattern + f"(?!{forbid_after})"
    return pattern


class PatternReplacer:
    """Replace every occurrence of known strings in one coordinated pass.

    Usage:
        replacer = PatternReplacer({"Employee A": "Jane", "Employee AA": "Zoe"})
        replacer.replace("Employee AA and Employee A")  # "Zoe and Jane"

    With ``whole_words=True`` (the default) a term never matches inside a
    longer word. With ``whole_words=False`` terms match as plain substrings,
    so "Novo" is found inside "Novos"; ``forbid_after`` is then an optional
    regex character class that must not follow a match.
    """

    def __init__(
        self,
        replacements: Mapping[str, str],
        *,
        whole_words: bool = True,
        forbid_after: str | None = None,
    ) -> None:
        self._replacements = {k: v for k, v in replacements.items() if k}
        # Longest first; ties ordered alphabetically so the regex is stable.
        ordered = sorted(self._replacements, key=lambda k: (-len(k), k))
        self._pattern: re.Pattern[str] | None = (
            re.compile(
                "|".join(_edge_guarded(term, whole_words, forbid_after) for term in ordered)
            )
            if ordered
            else None
        )

    def __bool__(self) -> bool:
        return self._pattern is not None

    def replace(self, text: str) -> str:
        return self.replace_with_matches(text)[0]

    def replace_with_matches(self, text: str) -> tuple[str, list[str]]:
        """Return the substituted text and the matched terms in text order."""
        if self._pattern is None or not text:
            return text, []

        matched: list[str] = []

        def substitute(match: re.Match[str]) -> str:
            term = match.group(0)
            matched.append(term)
            return self._replacements[term]

        return self._pattern.sub(substitute, text), matched
