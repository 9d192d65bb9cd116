# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from unittest.mock import patch

import pytest
from click.testing import CliRunner

from cwrap_lib.core.config import CFG
from cwrap_lib.core.error import CWrapError
from cwrap_lib.generate.cli import env, init, preamble, remove, run, script
from cwrap_lib.properties.context import PlanningContext

JOB = """
job_id: ID0001
container:
  lfn: busybox.tar
  type: docker
  mounts:
    - /data:/data:ro
  profiles:
    env:
      FOO: bar
profiles:
  pegasus:
    gpus: 1
"""


@pytest.fixture
def job_file(tmp_path):
    file = tmp_path / "job.yaml"
    file.write_text(JOB)
    return str(file)


def test_init_prints_snippet(job_file):
    result = CliRunner().invoke(init, [job_file])

    assert result.exit_code == 0
    assert result.stdout == "docker_init busybox.tar\n"


def test_run_prints_snippet(job_file):
    result = CliRunner().invoke(run, [job_file])

    assert result.exit_code == 0
    assert result.stdout.startswith(
        "docker run --user root -v $PWD:/scratch --gpus all -v /data:/data:ro "
        "-w=/scratch --entrypoint /bin/sh --name $cont_name  $cont_image -c "
    )


def test_remove_prints_snippet(job_file):
    result = CliRunner().invoke(remove, [job_file])

    assert result.exit_code == 0
    assert result.stdout == "docker rm --force $cont_name  1>&2\n"


def test_env_prints_snippet(job_file):
    result = CliRunner().invoke(env, [job_file])

    assert result.exit_code == 0
    assert 'export FOO="bar"\n' in result.stdout
    assert "export PATH=\\$root_path\n" in result.stdout


def test_preamble_uses_planning_context_options(job_file):
    result = CliRunner().invoke(
        preamble,
        [
            job_file,
            "--workflow-id",
            "diamond",
            "--worker-package-version",
            "5.1.2",
            "--no-strict-wp-check",
            "--no-wp-download",
        ],
    )

    assert result.exit_code == 0
    assert "# worker package setup for workflow diamond\n" in result.stdout
    assert "pegasus_lite_version_major=5\n" in result.stdout
    assert "pegasus_lite_version_minor=1\n" in result.stdout
    assert "pegasus_lite_version_patch=2\n" in result.stdout
    assert "pegasus_lite_enforce_strict_wp_check=false\n" in result.stdout
    assert "pegasus_lite_version_allow_wp_auto_download=false\n" in result.stdout


def test_script_with_container_technology_option(job_file):
    result = CliRunner().invoke(script, [job_file, "-t", "singularity"])

    assert result.exit_code == 0
    assert "# ---- Singularity: container run (host) ----\n" in result.stdout
    assert "singularity exec --no-home" in result.stdout


def test_options_are_passed_to_generator(job_file):
    with patch("cwrap_lib.generate.cli.Generator") as mock_generator:
        mock_generator.init.return_value = "snippet"
        result = CliRunner().invoke(
            init, [job_file, "--container-technology", "docker", "--workflow-id", "w"]
        )

    assert result.exit_code == 0
    args = mock_generator.call_args[0]
    assert str(args[0]) == job_file
    assert args[1] == "docker"
    assert args[2] == PlanningContext.fromDefaults(workflow_id="w")


def test_missing_job_file_exits_91(tmp_path):
    with patch("cwrap_lib.generate.cli.logger") as mock_logger:
        result = CliRunner().invoke(run, [str(tmp_path / "missing.yaml")])

    assert result.exit_code == CFG.exit_codes.default
    mock_logger.error.assert_called_once()
    assert "does not exist" in str(mock_logger.error.call_args[0][0])


def test_unknown_technology_exits_91(job_file):
    with patch("cwrap_lib.generate.cli.logger") as mock_logger:
        result = CliRunner().invoke(run, [job_file, "-t", "podman"])

    assert result.exit_code == CFG.exit_codes.default
    assert "podman" in str(mock_logger.error.call_args[0][0])


def test_invalid_worker_package_version_exits_91(job_file):
    with patch("cwrap_lib.generate.cli.logger") as mock_logger:
        result = CliRunner().invoke(
            preamble, [job_file, "--worker-package-version", "five"]
        )

    assert result.exit_code == CFG.exit_codes.default
    mock_logger.error.assert_called_once()


@pytest.mark.parametrize("command", [init, run, remove, env, preamble, script])
def test_commands_catch_cwrap_error(job_file, command):
    with (
        patch(
            "cwrap_lib.generate.cli.Generator", side_effect=CWrapError("failure")
        ),
        patch("cwrap_lib.generate.cli.logger") as mock_logger,
    ):
        result = CliRunner().invoke(command, [job_file])

    assert result.exit_code == CFG.exit_codes.default
    mock_logger.error.assert_called_once()
    assert "failure" in str(mock_logger.error.call_args[0][0])


def test_commands_catch_generic_exception_and_exit_99(job_file):
    with (
        patch(
            "cwrap_lib.generate.cli.Generator",
            side_effect=Exception("unexpected error"),
        ),
        patch("cwrap_lib.generate.cli.logger") as mock_logger,
    ):
        result = CliRunner().invoke(script, [job_file])

    assert result.exit_code == CFG.exit_codes.unexpected_error
    mock_logger.critical.assert_called_once_with(
        mock_logger.critical.call_args[0][0], exc_info=True, stack_info=True
    )


def test_profiles_not_a_mapping_exits_91(tmp_path):
    file = tmp_path / "job.yaml"
    file.write_text("job_id: ID0001\ncontainer:\n  lfn: busybox.tar\nprofiles: [a]\n")

    with patch("cwrap_lib.generate.cli.logger") as mock_logger:
        result = CliRunner().invoke(run, [str(file)])

    assert result.exit_code == CFG.exit_codes.default
    mock_logger.error.assert_called_once()
    mock_logger.critical.assert_not_called()
