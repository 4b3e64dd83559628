"""Subprocess execution with rich error context.

All external tool invocations go through run_subprocess_with_context so that
failures surface as RuntimeError carrying the command line, exit code and
captured output.
"""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
) -> subprocess.CompletedProcess[str]:
    """Execute a command, capturing text output, with enriched error reporting.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of the operation,
            used in error messages ("Failed to <operation_context>")
        cwd: Working directory for command execution

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        RuntimeError: If the command exits non-zero or the binary is not found
    """
    cmd_str = " ".join(str(arg) for arg in cmd)
    logger.debug("Running command: %s", cmd_str)

    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )

    except subprocess.CalledProcessError as e:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {e.returncode}"

        if e.stdout:
            stdout_stripped = e.stdout.strip()
            if stdout_stripped:
                error_msg += f"\nstdout: {stdout_stripped}"

        if e.stderr:
            stderr_stripped = e.stderr.strip()
            if stderr_stripped:
                error_msg += f"\nstderr: {stderr_stripped}"

        raise RuntimeError(error_msg) from e

    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e
