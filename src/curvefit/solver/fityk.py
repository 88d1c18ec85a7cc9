"""cfityk operations for fitting shapes to XY data files."""

import logging
import subprocess
from typing import List, Optional, Sequence

from curvefit.domain.models import SolverOutput
from curvefit.domain.exceptions import ExternalToolError, SolverTimeout
from curvefit.utils.timing import timeit

logger = logging.getLogger(__name__)


class FitykSolver:
    """Drives the fityk command line interface, one process per shape."""

    TOOL_NAME = "fityk"

    def __init__(
        self,
        executable: str = "cfityk",
        timeout_seconds: Optional[float] = 60,
        extra_args: Sequence[str] = (),
    ):
        self.executable = executable
        self.timeout_seconds = timeout_seconds
        self.extra_args = tuple(extra_args)

    @classmethod
    def from_settings(cls, solver_settings) -> "FitykSolver":
        return cls(
            executable=solver_settings.executable,
            timeout_seconds=solver_settings.timeout_seconds,
            extra_args=solver_settings.extra_args,
        )

    @staticmethod
    def build_script(shape: str, data_path: str) -> str:
        """fityk commands that load the data, guess the shape and print the report."""
        return (
            f"@0 < '{data_path}'; guess {shape}; fit; "
            "info+ formula in @0; info fit in @0; info errors in @0;"
        )

    def build_command(self, shape: str, data_path: str) -> List[str]:
        return [
            self.executable,
            "-I",
            "-q",
            *self.extra_args,
            "-c",
            self.build_script(shape, data_path),
        ]

    @timeit(logger, "cfityk run")
    def run(self, shape: str, data_path: str) -> SolverOutput:
        cmd = self.build_command(shape, data_path)
        logger.debug("[cfityk] running: %s", " ".join(cmd))

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError as e:
            raise ExternalToolError(
                f"{self.executable} is not available in the system",
                tool_name=self.TOOL_NAME,
                command=self.executable,
            ).add_suggestion(
                f"Install fityk and ensure '{self.executable}' is in PATH"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise SolverTimeout(shape, self.timeout_seconds).add_context(
                'command', self.executable
            ) from e

        if result.returncode != 0:
            logger.warning(
                "cfityk exited with %s for %s: %s",
                result.returncode,
                shape,
                (result.stderr or "").strip() or "no stderr",
            )

        return SolverOutput(
            shape=shape,
            returncode=result.returncode,
            lines=tuple(result.stdout.splitlines()),
            stderr=result.stderr or "",
        )

    def is_available(self) -> bool:
        """Check if cfityk can be started."""
        return self.get_version() is not None

    def get_version(self) -> Optional[str]:
        """Get the cfityk version string."""
        try:
            result = subprocess.run(
                [self.executable, "--version"],
                capture_output=True,
                text=True,
                errors="replace",
                timeout=10,
            )
        except (OSError, subprocess.TimeoutExpired):
            return None
        if result.returncode == 0:
            return result.stdout.strip()
        return None
