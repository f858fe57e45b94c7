"""
Project Bootstrapper
====================

Bootstraps a Vite + React project laid out with Feature-Sliced Design.

Key Features:
- Scaffold the base app with `npm create vite`
- Install Tailwind CSS, Zustand and React Query
- Overwrite config, styles, root component, entry point and README
- Create the FSD directory skeleton with placeholder index files
- Record completed steps so a failed run can resume from the failing step
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional
from pathlib import Path
import logging

from fsd_starter.bootstrap import templates
from fsd_starter.bootstrap.command_runner import CommandRunner, CommandResult
from fsd_starter.config import StarterConfig

logger = logging.getLogger(__name__)


class StepFailure(Exception):
    """Raised when a bootstrap step fails (command exit or filesystem error)."""

    def __init__(self, step: str, message: str):
        super().__init__(message)
        self.step = step


@dataclass
class BootstrapSession:
    """
    State carried through one bootstrap run.

    Attributes:
        project_name: Name as typed by the user ('.' means the current directory)
        invocation_dir: Directory the run was started from
        working_directory: Starts as invocation_dir, becomes the project root
            once the project directory has been entered
    """
    project_name: str
    invocation_dir: Path
    working_directory: Optional[Path] = None

    def __post_init__(self):
        if self.working_directory is None:
            self.working_directory = self.invocation_dir

    @property
    def project_root(self) -> Path:
        return self.invocation_dir / self.project_name


@dataclass
class BootstrapResult:
    """Result of a bootstrap run."""
    success: bool
    project_root: str = ""
    completed_steps: List[str] = field(default_factory=list)
    failed_step: Optional[str] = None
    files_written: List[str] = field(default_factory=list)
    directories_created: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def last_completed_step(self) -> Optional[str]:
        return self.completed_steps[-1] if self.completed_steps else None


@dataclass(frozen=True)
class BootstrapStep:
    """One named unit of the bootstrap sequence."""
    name: str
    description: str
    action: Callable[[BootstrapSession, BootstrapResult], None]


class ProjectBootstrapper:
    """
    Runs the bootstrap sequence in fixed order.

    Every step assumes the previous one succeeded. The first failure stops
    the run; nothing already written is rolled back.
    """

    def __init__(
        self,
        config: Optional[StarterConfig] = None,
        runner: Optional[CommandRunner] = None,
        base_dir: Optional[Path] = None,
        progress_callback: Optional[Callable[[int, BootstrapStep], None]] = None
    ):
        """
        Initialize project bootstrapper.

        Args:
            config: Starter settings (defaults to StarterConfig())
            runner: Command runner for npm (defaults to CommandRunner())
            base_dir: Directory to bootstrap in (defaults to the current directory)
            progress_callback: Called with (step number, step) before each step runs
        """
        self.config = config or StarterConfig()
        self.runner = runner or CommandRunner()
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()
        self.progress_callback = progress_callback

        self.steps: List[BootstrapStep] = [
            BootstrapStep('create_project', 'Creating Vite React project', self._create_project),
            BootstrapStep('enter_project_directory', 'Entering project directory', self._enter_project_directory),
            BootstrapStep('install_dependencies', 'Installing libraries', self._install_dependencies),
            BootstrapStep('write_vite_config', 'Writing Vite config', self._write_vite_config),
            BootstrapStep('write_global_styles', 'Adding Tailwind import to global styles', self._write_global_styles),
            BootstrapStep('create_fsd_structure', 'Creating FSD folder structure', self._create_fsd_structure),
            BootstrapStep('write_app_component', 'Writing App component', self._write_app_component),
            BootstrapStep('write_main_entry', 'Writing main entry point', self._write_main_entry),
            BootstrapStep('write_readme', 'Writing README', self._write_readme),
        ]

    @property
    def step_names(self) -> List[str]:
        return [step.name for step in self.steps]

    def bootstrap(self, project_name: str, start_at: Optional[str] = None) -> BootstrapResult:
        """
        Bootstrap a project.

        Args:
            project_name: Project directory name ('.' for the current directory)
            start_at: Name of the step to resume from (earlier steps are skipped)

        Returns:
            BootstrapResult with completed steps and, on failure, the failing step

        Raises:
            ValueError: If start_at is not a known step name
        """
        start_index = 0
        if start_at is not None:
            if start_at not in self.step_names:
                raise ValueError(
                    f"Unknown step '{start_at}' (expected one of: {', '.join(self.step_names)})"
                )
            start_index = self.step_names.index(start_at)

        session = BootstrapSession(project_name=project_name, invocation_dir=self.base_dir)
        result = BootstrapResult(success=True, project_root=str(session.project_root))

        logger.info(f"Bootstrapping project '{project_name}' in {self.base_dir}")

        try:
            # Resuming past the directory switch still has to target the project root
            if start_index > self.step_names.index('enter_project_directory'):
                self._enter_project_directory(session, result)

            for number, step in enumerate(self.steps[start_index:], start=start_index + 1):
                if self.progress_callback:
                    self.progress_callback(number, step)
                logger.info(f"Step {number}/{len(self.steps)}: {step.name}")
                self._run_step(step, session, result)
                result.completed_steps.append(step.name)

        except StepFailure as e:
            result.success = False
            result.failed_step = e.step
            result.errors.append(str(e))
            logger.error(f"Bootstrap failed at step '{e.step}' for '{project_name}': {e}")

        if result.success:
            logger.info(
                f"Bootstrapped project '{project_name}': "
                f"{len(result.files_written)} files, "
                f"{len(result.directories_created)} directories"
            )

        return result

    def _run_step(self, step: BootstrapStep, session: BootstrapSession, result: BootstrapResult) -> None:
        try:
            step.action(session, result)
        except StepFailure:
            raise
        except (OSError, ValueError) as e:
            raise StepFailure(step.name, f"{step.description} failed: {e}") from e

    def _check_command(self, step: str, outcome: CommandResult) -> None:
        if not outcome.ok:
            raise StepFailure(step, outcome.describe())

    def _create_project(self, session: BootstrapSession, result: BootstrapResult) -> None:
        args = templates.create_command(self.config.npm_command, session.project_name)
        self._check_command('create_project', self.runner.run(args, cwd=session.invocation_dir))

    def _enter_project_directory(self, session: BootstrapSession, result: BootstrapResult) -> None:
        project_root = session.project_root
        if not project_root.is_dir():
            raise StepFailure(
                'enter_project_directory',
                f"Project directory does not exist: {project_root}"
            )
        session.working_directory = project_root
        logger.debug(f"Working directory is now {project_root}")

    def _install_dependencies(self, session: BootstrapSession, result: BootstrapResult) -> None:
        args = templates.install_command(self.config.npm_command)
        self._check_command('install_dependencies', self.runner.run(args, cwd=session.working_directory))

    def _write_file(self, session: BootstrapSession, result: BootstrapResult, relative_path: str, content: str) -> None:
        target = session.working_directory / relative_path
        target.write_text(content, encoding='utf-8')
        result.files_written.append(str(target))
        logger.debug(f"Wrote {target}")

    def _write_vite_config(self, session: BootstrapSession, result: BootstrapResult) -> None:
        self._write_file(session, result, templates.VITE_CONFIG_PATH, templates.VITE_CONFIG)

    def _write_global_styles(self, session: BootstrapSession, result: BootstrapResult) -> None:
        self._write_file(session, result, templates.GLOBAL_STYLES_PATH, templates.GLOBAL_STYLES)

    def _create_fsd_structure(self, session: BootstrapSession, result: BootstrapResult) -> None:
        for directory in templates.FSD_DIRECTORIES:
            dir_path = session.working_directory / directory
            dir_path.mkdir(parents=True, exist_ok=True)
            result.directories_created.append(str(dir_path))
            self._write_file(
                session,
                result,
                f"{directory}/{templates.PLACEHOLDER_FILENAME}",
                templates.PLACEHOLDER_CONTENT
            )

    def _write_app_component(self, session: BootstrapSession, result: BootstrapResult) -> None:
        self._write_file(session, result, templates.APP_COMPONENT_PATH, templates.APP_COMPONENT)

    def _write_main_entry(self, session: BootstrapSession, result: BootstrapResult) -> None:
        self._write_file(session, result, templates.MAIN_ENTRY_PATH, templates.MAIN_ENTRY)

    def _write_readme(self, session: BootstrapSession, result: BootstrapResult) -> None:
        self._write_file(session, result, templates.README_PATH, templates.render_readme(session.project_name))
