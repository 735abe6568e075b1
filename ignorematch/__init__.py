"""Ignore-file pattern matching: compile pattern lines, query paths."""

from .glob_match import glob_match
from .ignore_rules import (
    IgnoreSet,
    compile_ignore_file,
    compile_ignore_lines,
    iter_included_files,
    load_ignore_patterns,
    should_ignore,
)
from .path_tokenizer import TokenizedPath, split_path, tokenize
from .rules import Rule, compile_rule, match_components

__all__ = [
    "glob_match",
    "IgnoreSet",
    "compile_ignore_file",
    "compile_ignore_lines",
    "iter_included_files",
    "load_ignore_patterns",
    "should_ignore",
    "TokenizedPath",
    "split_path",
    "tokenize",
    "Rule",
    "compile_rule",
    "match_components",
]
