import subprocess
import sys
from unittest.mock import MagicMock, patch

import pytest

from curvefit.config.settings import SolverSettings
from curvefit.domain.exceptions import ExternalToolError, SolverTimeout
from curvefit.runners.pipeline import fit
from curvefit.solver import FitykSolver, SolverClient


@pytest.fixture
def solver():
    return FitykSolver(executable="cfityk", timeout_seconds=30)


def _completed(returncode=0, stdout="", stderr=""):
    result = MagicMock()
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    return result


class TestCommand:

    def test_script_loads_data_and_requests_report(self):
        script = FitykSolver.build_script("Linear", "/tmp/data.xy")
        assert script == (
            "@0 < '/tmp/data.xy'; guess Linear; fit; "
            "info+ formula in @0; info fit in @0; info errors in @0;"
        )

    def test_command_layout(self, solver):
        cmd = solver.build_command("Quadratic", "/tmp/d")
        assert cmd[:3] == ["cfityk", "-I", "-q"]
        assert cmd[3] == "-c"
        assert "guess Quadratic" in cmd[4]

    def test_extra_args_go_before_script(self):
        solver = FitykSolver(extra_args=("-n",))
        assert solver.build_command("Linear", "/tmp/d")[3:5] == ["-n", "-c"]

    def test_from_settings(self):
        solver = FitykSolver.from_settings(
            SolverSettings(executable="/opt/cfityk", timeout_seconds=5)
        )
        assert solver.executable == "/opt/cfityk"
        assert solver.timeout_seconds == 5

    def test_satisfies_solver_protocol(self, solver):
        assert isinstance(solver, SolverClient)


class TestRun:

    @patch("subprocess.run")
    def test_success(self, mock_run, solver, reports):
        mock_run.return_value = _completed(stdout=reports["perfect_linear"])

        output = solver.run("Linear", "/tmp/data.xy")

        assert output.success
        assert output.shape == "Linear"
        assert output.lines[0] == "1000 + 1000 * (x)"
        mock_run.assert_called_once_with(
            solver.build_command("Linear", "/tmp/data.xy"),
            capture_output=True,
            text=True,
            errors="replace",
            timeout=30,
        )

    @patch("subprocess.run")
    def test_nonzero_exit_is_reported_not_raised(self, mock_run, solver, caplog):
        mock_run.return_value = _completed(returncode=2, stderr="parse error")

        with caplog.at_level("WARNING"):
            output = solver.run("Linear", "/tmp/data.xy")

        assert not output.success
        assert output.returncode == 2
        assert output.stderr == "parse error"
        assert "cfityk exited with 2" in caplog.text

    @patch("subprocess.run")
    def test_timeout(self, mock_run, solver):
        mock_run.side_effect = subprocess.TimeoutExpired(["cfityk"], 30)

        with pytest.raises(SolverTimeout) as exc_info:
            solver.run("Quadratic", "/tmp/data.xy")

        assert exc_info.value.shape == "Quadratic"
        assert exc_info.value.context["timeout_seconds"] == 30

    @patch("subprocess.run")
    def test_missing_executable(self, mock_run, solver):
        mock_run.side_effect = FileNotFoundError()

        with pytest.raises(ExternalToolError) as exc_info:
            solver.run("Linear", "/tmp/data.xy")

        assert exc_info.value.context["tool_name"] == "fityk"
        assert exc_info.value.context["command"] == "cfityk"
        assert "Install fityk" in str(exc_info.value)



@pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX shell script")
def test_undecodable_output_bytes_are_replaced(tmp_path, reports):
    script = tmp_path / "cfityk"
    script.write_bytes(
        b"#!/bin/sh\n"
        b"printf 'Guessing \\377 diag\\n'\n"
        b"cat <<'REPORT'\n"
        + reports["perfect_linear"].encode("ascii")
        + b"REPORT\n"
    )
    script.chmod(0o755)

    output = FitykSolver(executable=str(script)).run("Linear", "/tmp/unused.dat")
    assert output.lines[0].startswith("Guessing ")
    assert output.lines[0].endswith(" diag")

    result = fit(
        [[0, 1000.0], [1, 2000.0], [2, 3000.0]],
        shapes=["Linear"],
        solver=FitykSolver(executable=str(script)),
    )

    assert result.guess == "Linear"
    assert result.r_squared == 1.0


class TestAvailability:

    @patch("subprocess.run")
    def test_version(self, mock_run, solver):
        mock_run.return_value = _completed(stdout="cfityk 1.3.2\n")
        assert solver.get_version() == "cfityk 1.3.2"
        assert solver.is_available()

    @patch("subprocess.run")
    def test_not_installed(self, mock_run, solver):
        mock_run.side_effect = FileNotFoundError()
        assert solver.get_version() is None
        assert not solver.is_available()

    @patch("subprocess.run")
    def test_version_failure(self, mock_run, solver):
        mock_run.return_value = _completed(returncode=1)
        assert solver.get_version() is None
