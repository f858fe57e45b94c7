"""
Project Bootstrap Module
========================

Bootstraps Vite + React projects with a Feature-Sliced Design layout.

Key Components:
- CommandRunner: Runs npm with the terminal's streams attached
- ProjectBootstrapper: Orchestrates the ordered bootstrap steps
- templates: Literal file contents and the FSD directory list
"""

from fsd_starter.bootstrap.command_runner import CommandRunner, CommandResult
from fsd_starter.bootstrap.project_bootstrapper import (
    ProjectBootstrapper,
    BootstrapResult,
    BootstrapSession,
    BootstrapStep,
    StepFailure,
)

__all__ = [
    'CommandRunner',
    'CommandResult',
    'ProjectBootstrapper',
    'BootstrapResult',
    'BootstrapSession',
    'BootstrapStep',
    'StepFailure',
]
