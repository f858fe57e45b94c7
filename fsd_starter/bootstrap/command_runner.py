"""
Command Runner
==============

Runs external tooling (npm) for the bootstrapper.

Key Features:
- Synchronous execution, blocks until the child exits
- Child inherits the terminal's stdin/stdout/stderr
- No timeout
- Failures are reported through CommandResult instead of raised
"""

from dataclasses import dataclass
from typing import List, Optional
from pathlib import Path
import logging
import subprocess

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """
    Outcome of one external command.

    Attributes:
        args: Full argument vector that was executed
        cwd: Working directory the command ran in
        returncode: Exit status (127 when the executable could not be launched)
        error: Launch error message, if the command never started
    """
    args: List[str]
    cwd: str
    returncode: int
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and self.error is None

    def describe(self) -> str:
        """Human-readable summary of a failed command."""
        command = ' '.join(self.args)
        if self.error:
            return f"Could not run '{command}': {self.error}"
        return f"Command failed (exit {self.returncode}): {command}"


class CommandRunner:
    """Runs commands with the invoking process's standard streams attached."""

    def run(self, args: List[str], cwd: Path) -> CommandResult:
        """
        Run a command and wait for it to finish.

        Args:
            args: Command and arguments (e.g., ['npm', 'install', 'zustand'])
            cwd: Working directory for the command

        Returns:
            CommandResult describing the exit status
        """
        logger.debug(f"Running command: {' '.join(args)} in {cwd}")

        try:
            completed = subprocess.run(args, cwd=str(cwd))
        except FileNotFoundError:
            return CommandResult(
                args=list(args),
                cwd=str(cwd),
                returncode=127,
                error=f"executable not found: {args[0]}"
            )
        except (OSError, ValueError) as e:
            # ValueError: arguments containing NUL bytes
            return CommandResult(args=list(args), cwd=str(cwd), returncode=127, error=str(e))

        if completed.returncode != 0:
            logger.debug(f"Command exited with {completed.returncode}: {' '.join(args)}")

        return CommandResult(args=list(args), cwd=str(cwd), returncode=completed.returncode)
