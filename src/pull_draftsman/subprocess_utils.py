"""Subprocess helpers shared by the real gateways."""

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    *,
    cmd: list[str],
    operation_context: str,
    cwd: Path,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command and raise a descriptive error if it fails.

    Args:
        cmd: Command and arguments
        operation_context: Human-readable description used in the error message,
            e.g. "list remote branches"
        cwd: Working directory
        timeout: Optional timeout in seconds

    Returns:
        The completed process with captured text output

    Raises:
        RuntimeError: If the command cannot be started, times out, or exits non-zero
    """
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise RuntimeError(f"Failed to {operation_context}: {cmd[0]} not found") from e
    except subprocess.TimeoutExpired as e:
        raise RuntimeError(f"Failed to {operation_context}: timed out after {timeout}s") from e

    if result.returncode != 0:
        stderr = result.stderr.strip()
        message = f"Failed to {operation_context}"
        if stderr:
            message = f"{message}: {stderr}"
        logger.debug("Command failed (exit %d): %s", result.returncode, stderr)
        raise RuntimeError(message)

    return result
