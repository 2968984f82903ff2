"""Git utility functions for commit-picker."""

import subprocess
import logging
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class CommitPickerError(Exception):
    """Base class for commit-picker errors."""


class ExternalToolFailure(CommitPickerError):
    """Git exited non-zero or could not be run at all."""

    def __init__(self, command: Sequence[str], returncode: Optional[int] = None, output: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.output = output.strip()

        if returncode is None:
            message = f"'{' '.join(self.command)}' could not be run"
        else:
            message = f"'{' '.join(self.command)}' failed with exit code {returncode}"
        if self.output:
            message += f": {self.output}"
        super().__init__(message)


def _run_git_command(args: List[str], repo_path: str = ".") -> Tuple[str, str, int]:
    """
    Run a git command without a shell.

    Returns:
        Tuple of (stdout, stderr, exit code)

    Raises:
        ExternalToolFailure: If the git executable could not be started
    """
    cmd = ["git"] + args
    logger.debug(f"Running: {' '.join(cmd)} (cwd={repo_path})")
    try:
        result = subprocess.run(
            cmd,
            cwd=repo_path,
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
            shell=False,
            check=False
        )
    except OSError as e:
        logger.error(f"Error running git command: {str(e)}")
        raise ExternalToolFailure(cmd, output=str(e)) from e

    stdout = (result.stdout or "").replace('\r\n', '\n')
    stderr = (result.stderr or "").replace('\r\n', '\n')
    return stdout, stderr, result.returncode


def get_staged_files(repo_path: str = ".") -> List[str]:
    """
    Get the paths currently staged for commit.

    Args:
        repo_path: Directory to run git in

    Returns:
        Staged paths relative to the repository root, in git's order.
        Empty when nothing is staged.

    Raises:
        ExternalToolFailure: If git fails or cannot be run
    """
    args = ["-c", "core.quotepath=false", "diff", "--name-only", "--cached"]
    stdout, stderr, code = _run_git_command(args, repo_path)
    if code != 0:
        logger.error(f"Failed to list staged files. Exit code: {code}")
        raise ExternalToolFailure(["git"] + args, code, stderr or stdout)

    files = [line for line in stdout.split("\n") if line.strip()]
    logger.info(f"Found {len(files)} staged files")
    return files


def format_commit_message(category_label: str, subject: str) -> str:
    """Join the category label and the subject into the final commit message."""
    return f"{category_label}: {subject}"


def create_commit(category_label: str, subject: str, repo_path: str = ".") -> None:
    """
    Commit the staged changes.

    The message is passed to git as a single argument, never through a shell.

    Args:
        category_label: Commit category label, used verbatim
        subject: Free-text commit subject
        repo_path: Directory to run git in

    Raises:
        ExternalToolFailure: If the commit fails
    """
    message = format_commit_message(category_label, subject)
    args = ["commit", "-m", message]
    stdout, stderr, code = _run_git_command(args, repo_path)

    if code != 0:
        logger.error(f"Commit failed: {stderr or stdout}")
        raise ExternalToolFailure(["git"] + args, code, stderr or stdout)

    logger.info("Commit successful")
    logger.debug(stdout)
