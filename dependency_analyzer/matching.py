"""Glob matching for definition files.

Patterns are anchored to match at any directory depth: the pattern
``package.json`` behaves like ``**/package.json`` and accepts
``package.json``, ``web/package.json`` and ``/abs/web/package.json``, but not
``web/xpackage.json``.

Supported syntax:
- ``*``      any run of characters within one path component
- ``**``     any run of characters, crossing component boundaries
- ``?``      exactly one character other than ``/``
- ``[abc]``  character class, ``[!abc]`` or ``[^abc]`` negated, ranges allowed
- ``{a,b}``  alternation (not nestable)
- ``\\x``    the literal character ``x``
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import PurePath

from .errors import ConfigurationError

_ANY_DEPTH_PREFIX = "(?:.*/)?"


def glob_to_regex(pattern: str) -> str:
    """Translate one glob pattern into an (unanchored) regular expression.

    Args:
        pattern: Glob pattern

    Returns:
        Regular expression source text

    Raises:
        ConfigurationError: If the pattern is syntactically invalid
    """
    if not pattern:
        raise ConfigurationError("Empty glob pattern")

    parts: list[str] = []
    in_group = False
    i = 0
    n = len(pattern)

    while i < n:
        c = pattern[i]

        if c == "\\":
            if i + 1 >= n:
                raise ConfigurationError(f"Glob pattern '{pattern}' ends with an escape character")
            parts.append(re.escape(pattern[i + 1]))
            i += 2
            continue

        if c == "*":
            if i + 1 < n and pattern[i + 1] == "*":
                parts.append(".*")
                i += 2
            else:
                parts.append("[^/]*")
                i += 1
            continue

        if c == "?":
            parts.append("[^/]")
        elif c == "[":
            end = pattern.find("]", i + 2 if i + 1 < n and pattern[i + 1] in "!^" else i + 1)
            if end == -1:
                raise ConfigurationError(f"Glob pattern '{pattern}' has an unterminated '['")
            parts.append(_translate_class(pattern, pattern[i + 1 : end]))
            i = end + 1
            continue
        elif c == "{":
            if in_group:
                raise ConfigurationError(f"Glob pattern '{pattern}' nests '{{' groups")
            in_group = True
            parts.append("(?:")
        elif c == "}":
            if not in_group:
                raise ConfigurationError(f"Glob pattern '{pattern}' has an unmatched '}}'")
            in_group = False
            parts.append(")")
        elif c == "," and in_group:
            parts.append("|")
        else:
            parts.append(re.escape(c))
        i += 1

    if in_group:
        raise ConfigurationError(f"Glob pattern '{pattern}' has an unterminated '{{'")

    return "".join(parts)


def _translate_class(pattern: str, body: str) -> str:
    negate = body[:1] in ("!", "^")
    if negate:
        body = body[1:]
    if not body:
        raise ConfigurationError(f"Glob pattern '{pattern}' has an empty character class")
    if "/" in body:
        raise ConfigurationError(f"Glob pattern '{pattern}' has a '/' inside a character class")

    chars = "".join(ch if ch == "-" else re.escape(ch) for ch in body)
    # A negated class must still stay within one path component
    return f"[^/{chars}]" if negate else f"[{chars}]"


class DefinitionFileMatcher:
    """Tests whether a path is a definition file for one resolver.

    Example:
        >>> matcher = DefinitionFileMatcher(["package.json"])
        >>> matcher.matches("/work/web/package.json")
        True
    """

    def __init__(self, globs: Sequence[str]):
        """Compile glob patterns.

        Args:
            globs: Ordered glob patterns, each matched at any directory depth

        Raises:
            ConfigurationError: If any pattern is invalid
        """
        self._globs = tuple(globs)
        self._compiled: list[re.Pattern[str]] = []
        for glob in self._globs:
            source = _ANY_DEPTH_PREFIX + glob_to_regex(glob)
            try:
                self._compiled.append(re.compile(source, re.DOTALL))
            except re.error as e:
                raise ConfigurationError(f"Invalid glob pattern '{glob}': {e}") from e

    @property
    def globs(self) -> tuple[str, ...]:
        return self._globs

    def matches(self, path: str | PurePath) -> bool:
        """Check whether any pattern matches the path.

        Args:
            path: Candidate file path, absolute or relative

        Returns:
            True if at least one pattern matches
        """
        normalized = str(path).replace("\\", "/")
        return any(regex.fullmatch(normalized) for regex in self._compiled)

    def __repr__(self) -> str:
        return f"DefinitionFileMatcher(globs={list(self._globs)})"
