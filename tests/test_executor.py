import json
import sys

import pytest

from minikube_agent.tools.executor import ClusterStatus, CommandOutput, MinikubeExecutor, SubprocessRunner
from minikube_agent.tools.result import ErrorKind, Failure, Success

from conftest import MissingBinaryRunner, STATUS_JSON


def test_stop_success_returns_output(make_executor):
    executor, runner = make_executor(CommandOutput(exit_code=0, output="Stopped."))

    result = executor.stop_cluster()

    assert isinstance(result, Success)
    assert result.payload == "Stopped."
    assert runner.calls == [{"argv": ["minikube", "stop"], "combine_stderr": True}]


def test_start_failure_keeps_output_verbatim(make_executor):
    executor, runner = make_executor(CommandOutput(exit_code=1, output="Error: no cluster"))

    result = executor.start_cluster()

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.EXECUTION_FAILED
    assert result.detail == "Error: no cluster"
    assert result.exit_code == 1
    assert runner.calls[0]["argv"] == ["minikube", "start"]


def test_start_success(make_executor):
    output = "😄  minikube v1.32.0\n🏄  Done! kubectl is now configured\n"
    executor, _ = make_executor(CommandOutput(exit_code=0, output=output))

    result = executor.start_cluster()

    assert result.ok
    assert result.payload == output


def test_status_decodes_all_fields(make_executor, status_output):
    executor, runner = make_executor(status_output)

    result = executor.get_status()

    assert isinstance(result, Success)
    status = result.payload
    assert isinstance(status, ClusterStatus)
    assert status.name == "minikube"
    assert status.host == "Running"
    assert status.kubelet == "Running"
    assert status.api_server == "Running"
    assert status.kubeconfig == "Configured"
    assert runner.calls == [{"argv": ["minikube", "status", "-o", "json"], "combine_stderr": False}]


def test_status_keeps_unfamiliar_state_strings(make_executor):
    payload = {
        "Name": "dev",
        "Host": "Paused",
        "Kubelet": "Stopped",
        "APIServer": "Irrelevant",
        "Kubeconfig": "Misconfigured",
    }
    executor, _ = make_executor(CommandOutput(exit_code=0, output=json.dumps(payload)))

    result = executor.get_status()

    assert result.ok
    assert result.payload.model_dump(by_alias=True) == payload


def test_status_ignores_extra_keys(make_executor):
    payload = json.loads(STATUS_JSON)
    payload["Worker"] = False
    payload["TimeToStop"] = "Nonexistent"
    executor, _ = make_executor(CommandOutput(exit_code=0, output=json.dumps(payload)))

    result = executor.get_status()

    assert result.ok
    assert result.payload.name == "minikube"


def test_status_not_json_is_malformed(make_executor):
    executor, _ = make_executor(CommandOutput(exit_code=0, output="not-json"))

    result = executor.get_status()

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.MALFORMED_OUTPUT
    assert result.raw_output == "not-json"
    assert "Failed to parse status JSON" in result.detail


@pytest.mark.parametrize("output", [
    '{"Name": "minikube", "Host": "Running"}',
    '[' + STATUS_JSON + ']',
    '{"Name": 1, "Host": "Running", "Kubelet": "Running", "APIServer": "Running", "Kubeconfig": "Configured"}',
])
def test_status_wrong_shape_is_malformed(make_executor, output):
    executor, _ = make_executor(CommandOutput(exit_code=0, output=output))

    result = executor.get_status()

    assert not result.ok
    assert result.kind is ErrorKind.MALFORMED_OUTPUT


def test_status_nonzero_exit_reports_stderr(make_executor):
    executor, _ = make_executor(CommandOutput(
        exit_code=85,
        output="",
        error_output='Profile "minikube" not found. Run "minikube profile list" to view all profiles.',
    ))

    result = executor.get_status()

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.EXECUTION_FAILED
    assert result.detail.startswith('Profile "minikube" not found')
    assert result.exit_code == 85


def test_status_nonzero_exit_falls_back_to_stdout(make_executor):
    executor, _ = make_executor(CommandOutput(exit_code=7, output=STATUS_JSON))

    result = executor.get_status()

    assert result.kind is ErrorKind.EXECUTION_FAILED
    assert result.detail == STATUS_JSON


def test_status_twice_is_equal(make_executor, status_output):
    executor, runner = make_executor(status_output)

    first = executor.get_status()
    second = executor.get_status()

    assert first.payload == second.payload
    assert len(runner.calls) == 2


def test_missing_binary_is_execution_failure():
    executor = MinikubeExecutor(runner=MissingBinaryRunner(), binary="/nope/minikube")

    for result in (executor.start_cluster(), executor.stop_cluster(), executor.get_status()):
        assert result.kind is ErrorKind.EXECUTION_FAILED
        assert "/nope/minikube" in result.detail


def test_profile_and_binary_are_passed(make_executor):
    executor, runner = make_executor(
        CommandOutput(exit_code=0, output="ok"),
        binary="/usr/local/bin/minikube",
        profile="dev",
    )

    executor.start_cluster()

    assert runner.calls[0]["argv"] == ["/usr/local/bin/minikube", "start", "-p", "dev"]


def test_success_envelope_for_status(make_executor, status_output):
    executor, _ = make_executor(status_output)

    envelope = executor.get_status().to_dict()

    assert envelope["success"] is True
    assert envelope["data"] == json.loads(STATUS_JSON)
    assert json.loads(envelope["output"]) == json.loads(STATUS_JSON)


def test_failure_envelope(make_executor):
    executor, _ = make_executor(CommandOutput(exit_code=1, output="Error: no cluster"))

    envelope = executor.start_cluster().to_dict()

    assert envelope == {
        "success": False,
        "error_kind": "ExecutionFailed",
        "error": "Error: no cluster",
        "exit_code": 1,
    }


NOISY_SCRIPT = "import sys; print('out'); sys.stdout.flush(); print('err', file=sys.stderr); sys.exit(3)"


def test_subprocess_runner_combines_streams():
    outcome = SubprocessRunner().run([sys.executable, "-c", NOISY_SCRIPT], combine_stderr=True)

    assert outcome.exit_code == 3
    assert not outcome.succeeded
    assert outcome.output.splitlines() == ["out", "err"]
    assert outcome.error_output == ""


def test_subprocess_runner_separates_streams():
    outcome = SubprocessRunner().run([sys.executable, "-c", NOISY_SCRIPT], combine_stderr=False)

    assert outcome.exit_code == 3
    assert outcome.output.strip() == "out"
    assert outcome.error_output.strip() == "err"


def test_subprocess_runner_success_exit_code():
    outcome = SubprocessRunner().run([sys.executable, "-c", "print('Stopped.')"])

    assert outcome.succeeded
    assert outcome.output.strip() == "Stopped."


def test_subprocess_runner_missing_binary(tmp_path):
    with pytest.raises(OSError):
        SubprocessRunner().run([str(tmp_path / "no-such-minikube"), "status"])


def test_executor_with_real_process_keeps_stderr_out_of_status():
    script = (
        "import sys; print('W1018 warning', file=sys.stderr); "
        "print(" + repr(STATUS_JSON) + ")"
    )
    executor = MinikubeExecutor(binary=sys.executable)
    executor.build_command = lambda *args: [sys.executable, "-c", script]

    result = executor.get_status()

    assert isinstance(result, Success)
    assert result.payload.kubeconfig == "Configured"


def test_executor_with_missing_binary(tmp_path):
    executor = MinikubeExecutor(binary=str(tmp_path / "no-such-minikube"))

    result = executor.start_cluster()

    assert result.kind is ErrorKind.EXECUTION_FAILED
    assert "no-such-minikube" in result.detail
