from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import settings
from .ignore_rules import IgnoreSet, compile_ignore_file, iter_included_files, load_ignore_patterns
from .rules import Rule
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ignorematch-check",
        description="Report which paths under ROOT are excluded by its ignore files.",
    )
    p.add_argument("root")
    p.add_argument("paths", nargs="*", help="root-relative paths; a trailing / marks a directory")
    p.add_argument("--ignore-file", action="append", default=[], dest="ignore_files",
                   help="ignore file to read instead of the configured names (repeatable)")
    p.add_argument("-v", "--verbose", action="store_true", help="print the deciding pattern")
    p.add_argument("-n", "--non-matching", action="store_true", help="also print paths that are not ignored")
    p.add_argument("--log-level", type=str.upper, default=settings.log_level.upper(),
                   choices=LOG_LEVELS)
    return p


def load_rules(root: Path, ignore_files: Sequence[str]) -> IgnoreSet:
    if not ignore_files:
        return load_ignore_patterns(root)
    rules: list[Rule] = []
    for name in ignore_files:
        path = Path(name)
        if not path.is_absolute():
            path = root / path
        rules.extend(compile_ignore_file(path))
    return IgnoreSet(rules)


def _format(path: str, rule: Rule | None, verbose: bool) -> str:
    if not verbose:
        return path
    return f"{rule.pattern if rule is not None else ''}\t{path}"


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    root = Path(args.root).resolve()
    try:
        ignore_set = load_rules(root, args.ignore_files)
    except OSError as e:
        logger.debug("Failed to load ignore rules", exc_info=e)
        print(f"ignorematch-check: cannot read ignore file: {e}", file=sys.stderr)
        return 2

    if not args.paths:
        for rel in iter_included_files(root, ignore_set):
            print(rel)
        return 0

    any_ignored = False
    for path in args.paths:
        rule = ignore_set.explain(path)
        ignored = rule is not None and not rule.negate
        any_ignored = any_ignored or ignored
        if ignored or args.non_matching:
            print(_format(path, rule, args.verbose))
    return 0 if any_ignored else 1


if __name__ == "__main__":
    sys.exit(main())
