"""Ignore sets: ordered rule lists evaluated with last-match-wins."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from .config import settings
from .path_tokenizer import TokenizedPath, normalize_separators, tokenize
from .rules import Rule, compile_rule

logger = logging.getLogger(__name__)


def _tokenize(path: str | os.PathLike[str], is_dir: bool) -> TokenizedPath:
    tokens = tokenize(normalize_separators(path))
    if is_dir and not tokens.is_dir:
        return TokenizedPath(components=tokens.components, is_dir=True)
    return tokens


class IgnoreSet:
    """Immutable, ordered collection of compiled ignore rules.

    Queries are pure functions of the rule list and the path, so one set can
    be shared between threads.
    """

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"IgnoreSet({[rule.pattern for rule in self._rules]!r})"

    def match(self, path: str | os.PathLike[str], *, is_dir: bool = False) -> bool:
        """Return whether ``path`` is ignored.

        A trailing separator marks a string ``path`` as a directory.
        ``os.PathLike`` objects drop trailing separators, so pass
        ``is_dir=True`` for them instead. Rules are applied in order: a
        matching rule sets the verdict to ``not rule.negate`` and a rule that
        does not match leaves it unchanged.
        """
        tokens = _tokenize(path, is_dir)
        ignored = False
        for rule in self._rules:
            if rule.matches_tokens(tokens):
                ignored = not rule.negate
        return ignored

    def explain(self, path: str | os.PathLike[str], *, is_dir: bool = False) -> Rule | None:
        """Return the rule that decides the verdict for ``path``, if any."""
        tokens = _tokenize(path, is_dir)
        for rule in reversed(self._rules):
            if rule.matches_tokens(tokens):
                return rule
        return None

    def filter(self, paths: Iterable[str]) -> list[str]:
        """Return the paths that are not ignored, in their original order."""
        return [path for path in paths if not self.match(path)]


def compile_ignore_lines(lines: Iterable[str]) -> IgnoreSet:
    rules: list[Rule] = []
    for number, raw in enumerate(lines, start=1):
        line = raw.strip(" \t\r\n")
        if not line or line.startswith("#"):
            continue
        rule = compile_rule(line)
        if rule is None:
            logger.debug("Skipping empty pattern on line %d: %r", number, raw)
            continue
        rules.append(rule)
    logger.debug("Compiled %d ignore rules", len(rules))
    return IgnoreSet(rules)


def compile_ignore_file(path: str | os.PathLike[str], *, encoding: str | None = None) -> IgnoreSet:
    """Compile the ignore file at ``path``.

    Read errors propagate as the original :class:`OSError`.
    """
    data = Path(path).read_bytes()
    # undecodable bytes survive as surrogates, like os.fsdecode'd file names
    text = data.decode(encoding or settings.encoding, errors="surrogateescape")
    ignore_set = compile_ignore_lines(text.split("\n"))
    logger.info("Loaded %d ignore rules from %s", len(ignore_set), path)
    return ignore_set


def load_ignore_patterns(root: Path, names: Sequence[str] | None = None) -> IgnoreSet:
    """Concatenate the ignore files found directly under ``root``.

    Files listed in ``names`` (default: the configured ignore files) that do
    not exist are skipped.
    """
    rules: list[Rule] = []
    for name in settings.ignore_files if names is None else names:
        p = Path(root) / name
        if p.exists():
            rules.extend(compile_ignore_file(p))
    return IgnoreSet(rules)


def should_ignore(ignore_set: IgnoreSet, root: Path, p: Path) -> bool:
    rel = Path(p).relative_to(root).as_posix()
    if rel == ".":
        return False
    return ignore_set.match(rel, is_dir=Path(p).is_dir())


def iter_included_files(root: Path, ignore_set: IgnoreSet) -> Iterator[str]:
    """Yield the root-relative POSIX paths of files that are not ignored."""
    root = Path(root)
    for path in sorted(root.rglob("*")):
        if path.is_file() and not should_ignore(ignore_set, root, path):
            yield path.relative_to(root).as_posix()
