"""
fsd-starter command line
========================

Prompts for a project name and bootstraps a Vite + React project with a
Feature-Sliced Design layout.

Usage:
    fsd-starter                      # prompt for the project name
    fsd-starter myapp                # create ./myapp
    fsd-starter .                    # install into the current folder
    fsd-starter myapp --from-step install_dependencies

Environment:
    FSD_STARTER_NPM and FSD_STARTER_LOG_LEVEL, optionally from ./.env
"""

from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from dotenv import load_dotenv

from fsd_starter.bootstrap.project_bootstrapper import ProjectBootstrapper, BootstrapStep
from fsd_starter.config import load_config

logger = logging.getLogger(__name__)

PROMPT = "Project name (enter . to install into the current folder): "


def build_parser(step_names: List[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fsd-starter',
        description="Bootstrap a Vite + React project with Tailwind CSS, Zustand, "
                    "React Query and a Feature-Sliced Design folder layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Prompt for the project name
  fsd-starter

  # Create ./myapp
  fsd-starter myapp

  # Install into the current folder
  fsd-starter .

  # Resume a failed run at the dependency installation
  fsd-starter myapp --from-step install_dependencies
        """
    )
    parser.add_argument(
        'project_name',
        nargs='?',
        default=None,
        help="Project directory name ('.' for the current folder); prompted for when omitted"
    )
    parser.add_argument(
        '--from-step',
        choices=step_names,
        default=None,
        help='Skip the steps before this one (resume a failed run)'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def prompt_project_name() -> Optional[str]:
    """Read the project name from stdin; None when input is closed or interrupted."""
    try:
        return input(PROMPT)
    except (EOFError, KeyboardInterrupt):
        print()
        return None


def _print_step(number: int, step: BootstrapStep) -> None:
    print(f"\n{number}. {step.description}...")


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(Path.cwd() / ".env")

    try:
        config = load_config()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    bootstrapper = ProjectBootstrapper(config=config, progress_callback=_print_step)
    args = build_parser(bootstrapper.step_names).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format='%(levelname)s %(name)s: %(message)s'
    )
    logger.debug(f"Using npm command: {config.npm_command}")

    project_name = args.project_name
    if project_name is None:
        project_name = prompt_project_name()
    if not project_name:
        print("Error: a project name is required", file=sys.stderr)
        return 1

    print(f"\nStarting setup for project {project_name}...")

    result = bootstrapper.bootstrap(project_name, start_at=args.from_step)

    if not result.success:
        print(f"\n❌ Error during {result.failed_step}: {'; '.join(result.errors)}", file=sys.stderr)
        print(
            f"Fix the problem and resume with: fsd-starter {project_name} --from-step {result.failed_step}",
            file=sys.stderr
        )
        return 1

    print("\n✅ Project setup complete!")
    print(f"\nTo run the project:\ncd {project_name}\nnpm run dev")
    return 0


if __name__ == "__main__":
    sys.exit(main())
