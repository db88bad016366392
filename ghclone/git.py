"""
Git helper utilities for ghclone.

Wraps the ``git`` executable to clone repositories, synchronously or from
a coroutine.
"""

import asyncio
import os
import subprocess
from pathlib import Path

from ghclone.exceptions import CloneError
from ghclone.logging import log_clone_operation


class GitHelper:
    """
    Clone capability backed by the ``git`` command line.

    Example:
        ```python
        from ghclone.git import GitHelper

        git = GitHelper()
        git.clone("https://github.com/octo/hello.git", "./hello")

        # Or from a coroutine
        await git.async_clone("https://github.com/octo/hello.git", "./hello")
        ```
    """

    def __init__(self, executable: str = "git", depth: int | None = None) -> None:
        """
        Initialize GitHelper.

        Args:
            executable: Name or path of the git executable
            depth: Optional shallow clone depth applied to every clone
        """
        self.executable = executable
        self.depth = depth

    def clone(self, clone_url: str, local_path: str | Path) -> None:
        """
        Clone a repository to a local path.

        Args:
            clone_url: The repository clone URL
            local_path: Local directory to clone into

        Raises:
            CloneError: If git clone exits with a non-zero status
            OSError: If the git executable cannot be started
        """
        local_path = Path(local_path)
        cmd = self._build_clone_command(clone_url, local_path)

        log_clone_operation("start", clone_url, local_path)
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            env=self._get_git_env(),
        )

        if result.returncode != 0:
            log_clone_operation("failed", clone_url, local_path, result.stderr)
            raise CloneError(clone_url, local_path, result.returncode, result.stderr)

        log_clone_operation("done", clone_url, local_path)

    async def async_clone(self, clone_url: str, local_path: str | Path) -> None:
        """
        Clone a repository without blocking the event loop.

        Args:
            clone_url: The repository clone URL
            local_path: Local directory to clone into

        Raises:
            CloneError: If git clone exits with a non-zero status
            OSError: If the git executable cannot be started
        """
        local_path = Path(local_path)
        cmd = self._build_clone_command(clone_url, local_path)

        log_clone_operation("start", clone_url, local_path)
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            env=self._get_git_env(),
        )
        _, stderr_bytes = await process.communicate()
        stderr = stderr_bytes.decode(errors="replace")

        if process.returncode != 0:
            log_clone_operation("failed", clone_url, local_path, stderr)
            raise CloneError(clone_url, local_path, process.returncode, stderr)

        log_clone_operation("done", clone_url, local_path)

    def _build_clone_command(self, clone_url: str, local_path: Path) -> list[str]:
        cmd = [self.executable, "clone"]

        if self.depth is not None:
            cmd.extend(["--depth", str(self.depth)])

        cmd.append(clone_url)
        cmd.append(str(local_path))
        return cmd

    def _get_git_env(self) -> dict[str, str]:
        """
        Get environment variables for git commands.

        Disables interactive credential prompts so a private or missing
        repository fails instead of blocking on stdin.
        """
        env = os.environ.copy()
        env["GIT_TERMINAL_PROMPT"] = "0"
        return env
