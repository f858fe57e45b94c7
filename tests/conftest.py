import sys
from pathlib import Path
from typing import List, Optional

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fsd_starter.bootstrap.command_runner import CommandResult


class RecordingRunner:
    """
    Stands in for npm.

    Records every call. `create` makes the project directory (with src/),
    the way the Vite scaffolder would. A verb listed in fail_on exits non-zero.
    """

    def __init__(self, fail_on: Optional[str] = None, returncode: int = 1):
        self.calls: List[tuple] = []
        self.fail_on = fail_on
        self.returncode = returncode

    def run(self, args, cwd):
        self.calls.append((list(args), Path(cwd)))
        verb = args[1]
        if verb == self.fail_on:
            return CommandResult(args=list(args), cwd=str(cwd), returncode=self.returncode)
        if verb == 'create':
            (Path(cwd) / args[3] / 'src').mkdir(parents=True, exist_ok=True)
        return CommandResult(args=list(args), cwd=str(cwd), returncode=0)


@pytest.fixture
def make_runner():
    return RecordingRunner
