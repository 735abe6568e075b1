from pathlib import Path

import pytest

from ignorematch.cli_check import main


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    (tmp_path / ".gitignore").write_text("*.log\nbuild/\n!keep.log\n", encoding="utf-8")
    for rel in ["a.log", "keep.log", "src/main.py", "src/b.log", "build/out.o"]:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x", encoding="utf-8")
    return tmp_path


def _stdout_lines(capfd) -> list[str]:
    return [line for line in capfd.readouterr().out.splitlines() if line]


def test_lists_included_files_without_paths(repo, capfd):
    assert main([str(repo), "--ignore-file", ".gitignore"]) == 0
    assert sorted(_stdout_lines(capfd)) == [".gitignore", "keep.log", "src/main.py"]


def test_prints_ignored_paths(repo, capfd):
    assert main([str(repo), "a.log", "src/main.py", "build/"]) == 0
    assert _stdout_lines(capfd) == ["a.log", "build/"]


def test_exit_status_is_one_when_nothing_is_ignored(repo, capfd):
    assert main([str(repo), "src/main.py", "keep.log"]) == 1
    assert _stdout_lines(capfd) == []


def test_verbose_and_non_matching_output(repo, capfd):
    assert main(["-v", "-n", str(repo), "a.log", "keep.log", "src/main.py"]) == 0
    assert _stdout_lines(capfd) == ["*.log\ta.log", "!keep.log\tkeep.log", "\tsrc/main.py"]


def test_missing_ignore_file_exits_with_two(repo, capfd):
    assert main(["--ignore-file", "nope", str(repo), "a.log"]) == 2
    assert "cannot read ignore file" in capfd.readouterr().err


def test_log_level_is_case_insensitive(repo, capfd):
    assert main(["--log-level", "debug", str(repo), "a.log"]) == 0
    assert _stdout_lines(capfd) == ["a.log"]


def test_unknown_log_level_is_a_usage_error(repo, capfd):
    with pytest.raises(SystemExit) as exc_info:
        main(["--log-level", "verbose", str(repo), "a.log"])

    assert exc_info.value.code == 2
    assert "--log-level" in capfd.readouterr().err
