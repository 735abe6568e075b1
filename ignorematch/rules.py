"""Compiled ignore rules and component-wise path matching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .glob_match import glob_match
from .path_tokenizer import TokenizedPath, split_path, tokenize

DOUBLE_STAR = "**"

_NO_MATCH = (False, False)


def _match_run(
    path: Sequence[str],
    components: Sequence[str],
    start: int,
    comp_start: int,
    first_match: dict[int, list[tuple[bool, bool]]],
) -> tuple[bool, bool]:
    """Match ``components[comp_start:]`` against ``path[start:]`` up to the next ``**``.

    The outcome after a ``**`` is looked up in ``first_match``.
    """
    path_len = len(path)
    index = start
    for pos in range(comp_start, len(components)):
        if index >= path_len:
            return _NO_MATCH
        component = components[pos]
        if component == DOUBLE_STAR:
            return first_match[pos + 1][index]
        if not glob_match(path[index], component):
            return _NO_MATCH
        index += 1
    return True, index == path_len


def match_components(path: Sequence[str], components: Sequence[str]) -> tuple[bool, bool]:
    """Match path components against rule components from the left.

    Returns ``(matched, consumed_whole_path)``. A rule may match a leading
    prefix of the path; the second flag reports whether the match reached the
    last path component, which is what directory-only rules care about.

    ``**`` consumes zero or more path components. Spans are tried from the
    shortest consumption up and the first one that matches decides both flags.
    Instead of recursing per ``**``, the components following each ``**`` are
    evaluated once for every path offset, last run first, so the work is
    polynomial and the stack depth constant.
    """
    path_len = len(path)
    run_starts = [pos + 1 for pos, component in enumerate(components) if component == DOUBLE_STAR]

    # first_match[c][q]: outcome of components[c:] against the first suffix
    # path[s:], s >= q, that it matches
    first_match: dict[int, list[tuple[bool, bool]]] = {}
    for comp_start in reversed(run_starts):
        firsts = [_NO_MATCH] * (path_len + 1)
        for start in range(path_len - 1, -1, -1):
            result = _match_run(path, components, start, comp_start, first_match)
            firsts[start] = result if result[0] else firsts[start + 1]
        first_match[comp_start] = firsts

    return _match_run(path, components, 0, 0, first_match)


@dataclass(frozen=True)
class Rule:
    """One pattern line of an ignore file.

    ``anchored`` rules match from the first path component only; the others
    may start at any depth. ``directory_only`` rules that consume the whole
    path require it to end with a separator.
    """

    pattern: str
    components: tuple[str, ...]
    negate: bool = False
    directory_only: bool = False
    anchored: bool = False

    def _accepts(self, consumed_whole_path: bool, is_dir: bool) -> bool:
        if not self.directory_only:
            return True
        return not consumed_whole_path or is_dir

    def matches_tokens(self, path: TokenizedPath) -> bool:
        components = path.components
        if self.anchored:
            matched, whole = match_components(components, self.components)
            return matched and self._accepts(whole, path.is_dir)

        for start in range(len(components)):
            matched, whole = match_components(components[start:], self.components)
            if matched:
                return self._accepts(whole, path.is_dir)
        return False

    def matches(self, path: str) -> bool:
        return self.matches_tokens(tokenize(path))


def compile_rule(line: str) -> Rule | None:
    """Compile one trimmed, non-comment pattern line.

    Returns ``None`` when nothing but markers is left (``!``, ``/``, ``!/``).
    """
    text = line
    negate = text.startswith("!")
    if negate:
        text = text[1:]

    anchor = text.startswith("/")
    if anchor:
        text = text[1:]

    # un-escapes a leading "!" or "#"
    if text.startswith("\\"):
        text = text[1:]

    directory_only = text.endswith("/")
    components: list[str] = []
    for component in split_path(text):
        # "**/**" spans exactly what a single "**" spans
        if component == DOUBLE_STAR and components and components[-1] == DOUBLE_STAR:
            continue
        components.append(component)
    if not components:
        return None

    return Rule(
        pattern=line,
        components=tuple(components),
        negate=negate,
        directory_only=directory_only,
        anchored=anchor or len(components) > 1,
    )
