import pytest
from typing import List, Sequence

from minikube_agent.tools.executor import CommandOutput, CommandRunner, MinikubeExecutor

STATUS_JSON = '{"Name":"minikube","Host":"Running","Kubelet":"Running","APIServer":"Running","Kubeconfig":"Configured"}'


class FakeRunner(CommandRunner):
    """Replays scripted CommandOutputs and records every command it was asked to run."""

    def __init__(self, *outputs: CommandOutput):
        self.outputs: List[CommandOutput] = list(outputs)
        self.calls: List[dict] = []

    def run(self, argv: Sequence[str], combine_stderr: bool = True) -> CommandOutput:
        self.calls.append({"argv": list(argv), "combine_stderr": combine_stderr})
        if len(self.outputs) == 1:
            return self.outputs[0]
        return self.outputs.pop(0)


class MissingBinaryRunner(CommandRunner):
    def run(self, argv: Sequence[str], combine_stderr: bool = True) -> CommandOutput:
        raise FileNotFoundError(2, "No such file or directory", argv[0])


@pytest.fixture
def make_executor():
    """Build an executor around a FakeRunner scripted with the given outputs."""
    def _make(*outputs: CommandOutput, **kwargs):
        runner = FakeRunner(*outputs)
        return MinikubeExecutor(runner=runner, **kwargs), runner
    return _make


@pytest.fixture
def status_output():
    return CommandOutput(exit_code=0, output=STATUS_JSON)
