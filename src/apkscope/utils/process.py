"""Subprocess wrapper for external tool invocations."""

import subprocess
from dataclasses import dataclass

from apkscope.exceptions import ProcessError
from apkscope.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Captured result of a tool run."""

    command: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        """Check if the command succeeded."""
        return self.returncode == 0

    @property
    def combined_output(self) -> str:
        """stdout followed by stderr (some tools report on either stream)."""
        return self.stdout + self.stderr


def run_tool(
    command: list[str],
    *,
    input_text: str | None = None,
    check: bool = True,
    timeout: float | None = None,
) -> ProcessResult:
    """Run an external tool and capture its text output.

    Args:
        command: Command and arguments to run.
        input_text: Optional text written to the tool's stdin.
        check: If True, raise ProcessError on non-zero exit.
        timeout: Optional timeout in seconds.

    Returns:
        ProcessResult with captured output.

    Raises:
        ProcessError: If the tool cannot be started, times out, or (with
            check=True) exits non-zero.
    """
    logger.debug("running tool", command=command, timeout=timeout)
    try:
        completed = subprocess.run(
            command,
            input=input_text,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise ProcessError(command, -1, f"Command timed out after {timeout}s") from e
    except FileNotFoundError as e:
        raise ProcessError(command, -1, f"Command not found: {command[0]}") from e

    result = ProcessResult(
        command=command,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
    logger.debug("tool finished", command=command[0], returncode=result.returncode)

    if check and not result.success:
        raise ProcessError(command, result.returncode, result.stderr)

    return result
