import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def _run_git(args: list[str], cwd: Path) -> str | None:
    try:
        result = subprocess.run(
            ["git", "-C", str(cwd), *args],
            check=False,
            capture_output=True,
            text=True,
        )
    except OSError:
        logger.debug("git is not available to query %s", cwd)
        return None
    if result.returncode != 0:
        return None
    output = result.stdout.strip()
    return output if output else None


def get_git_repo_root(start_dir: Path) -> Path | None:
    root = _run_git(["rev-parse", "--show-toplevel"], start_dir)
    return Path(root) if root else None


def get_head_commit(repo_dir: Path) -> str | None:
    """Return the commit hash HEAD points to in *repo_dir*, or ``None``."""
    output = _run_git(["rev-parse", "HEAD"], repo_dir)
    if output is None:
        return None
    return output.splitlines()[0]
