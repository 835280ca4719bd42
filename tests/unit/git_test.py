import subprocess
from pathlib import Path
from unittest.mock import patch

from copilot_bridge.core.git import get_git_repo_root, get_head_commit


def _run_git(args: list[str], cwd: Path) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


def _init_repo_with_commit(repo: Path) -> str:
    _run_git(["init"], repo)
    (repo / "init.py").write_text("x = 1\n", encoding="utf-8")
    _run_git(["add", "init.py"], repo)
    _run_git(
        ["-c", "user.name=Test Author", "-c", "user.email=author@example.com", "commit", "-m", "first"],
        repo,
    )
    return _run_git(["rev-parse", "HEAD"], repo)


def test_get_head_commit_returns_hash(tmp_path: Path) -> None:
    expected = _init_repo_with_commit(tmp_path)

    assert get_head_commit(tmp_path) == expected


def test_get_head_commit_in_empty_repo_returns_none(tmp_path: Path) -> None:
    _run_git(["init"], tmp_path)

    assert get_head_commit(tmp_path) is None


def test_get_head_commit_outside_repo_returns_none(tmp_path: Path) -> None:
    assert get_head_commit(tmp_path) is None


def test_get_git_repo_root_from_subdirectory(tmp_path: Path) -> None:
    _init_repo_with_commit(tmp_path)
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    root = get_git_repo_root(nested)

    assert root is not None
    assert root.resolve() == tmp_path.resolve()


def test_get_git_repo_root_outside_repo_returns_none(tmp_path: Path) -> None:
    assert get_git_repo_root(tmp_path) is None


def test_missing_git_executable_returns_none(tmp_path: Path) -> None:
    with patch("copilot_bridge.core.git.subprocess.run", side_effect=FileNotFoundError("git")):
        assert get_head_commit(tmp_path) is None
