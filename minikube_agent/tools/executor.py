# minikube_agent/tools/executor.py
"""
Minikube Command Executor

Runs one minikube lifecycle command per call and normalizes the outcome into
a Success or Failure result. Process creation sits behind the CommandRunner
interface so tests can script exit codes and output without a real cluster.

The executor never interprets status values: "Running", "Stopped" and
whatever else minikube reports are handed back verbatim.
"""

import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .result import ErrorKind, Failure, Success, ToolResult


class CommandOutput(BaseModel):
    """Outcome of a single external process."""
    model_config = ConfigDict(frozen=True)

    exit_code: int
    # stdout, or stdout and stderr interleaved when combined
    output: str = ""
    # stderr when it was captured separately
    error_output: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class CommandRunner(ABC):
    """
    Narrow capability: run an external command to completion and capture its
    exit code and output.
    """

    @abstractmethod
    def run(self, argv: Sequence[str], combine_stderr: bool = True) -> CommandOutput:
        """
        Run argv and block until it exits.

        Args:
            argv: Program and arguments
            combine_stderr: Merge stderr into output when True, otherwise
                capture it into error_output

        Raises:
            OSError: The program could not be started
        """
        pass


class SubprocessRunner(CommandRunner):
    """CommandRunner backed by subprocess.run. No timeout is imposed."""

    def run(self, argv: Sequence[str], combine_stderr: bool = True) -> CommandOutput:
        proc = subprocess.run(
            list(argv),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if combine_stderr else subprocess.PIPE,
            stdin=subprocess.DEVNULL,
            encoding="utf-8",
            errors="replace",
        )
        return CommandOutput(
            exit_code=proc.returncode,
            output=proc.stdout or "",
            error_output=proc.stderr or "",
        )


class ClusterStatus(BaseModel):
    """
    Structured projection of `minikube status -o json`.

    Field aliases are the identifiers minikube emits. Values are free-form
    state strings; unknown extra keys in the tool's output are ignored.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field(alias="Name")
    host: str = Field(alias="Host")
    kubelet: str = Field(alias="Kubelet")
    api_server: str = Field(alias="APIServer")
    kubeconfig: str = Field(alias="Kubeconfig")


class MinikubeExecutor:
    """
    Executes minikube lifecycle commands.

    Holds no mutable state, so one instance can serve concurrent requests;
    each call spawns exactly one process and waits for it.
    """

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        binary: str = "minikube",
        profile: Optional[str] = None,
    ):
        self.runner = runner or SubprocessRunner()
        self.binary = binary
        self.profile = profile

    def build_command(self, *args: str) -> List[str]:
        command = [self.binary, *args]
        if self.profile:
            command.extend(["-p", self.profile])
        return command

    def start_cluster(self) -> ToolResult:
        """Run `minikube start`; payload is the combined output."""
        return self._run_lifecycle("start")

    def stop_cluster(self) -> ToolResult:
        """Run `minikube stop`; payload is the combined output."""
        return self._run_lifecycle("stop")

    def get_status(self) -> ToolResult:
        """
        Run `minikube status -o json` and decode it into a ClusterStatus.

        stderr is kept apart from stdout so warnings printed by minikube do
        not corrupt the JSON document.

        Returns:
            Success(ClusterStatus) on exit 0 with decodable output,
            Failure(ExecutionFailed) on a non-zero exit,
            Failure(MalformedOutput) when the output does not decode.
        """
        outcome = self._launch(self.build_command("status", "-o", "json"), combine_stderr=False)
        if isinstance(outcome, Failure):
            return outcome

        if not outcome.succeeded:
            return Failure(
                kind=ErrorKind.EXECUTION_FAILED,
                detail=outcome.error_output or outcome.output,
                exit_code=outcome.exit_code,
            )

        try:
            status = ClusterStatus.model_validate_json(outcome.output)
        except ValidationError as e:
            return Failure(
                kind=ErrorKind.MALFORMED_OUTPUT,
                detail=f"Failed to parse status JSON: {e}",
                raw_output=outcome.output,
                exit_code=outcome.exit_code,
            )
        return Success(payload=status)

    def _run_lifecycle(self, subcommand: str) -> ToolResult:
        outcome = self._launch(self.build_command(subcommand), combine_stderr=True)
        if isinstance(outcome, Failure):
            return outcome

        if not outcome.succeeded:
            # The tool's own text is the diagnostic; pass it through untouched
            return Failure(
                kind=ErrorKind.EXECUTION_FAILED,
                detail=outcome.output,
                exit_code=outcome.exit_code,
            )
        return Success(payload=outcome.output)

    def _launch(self, command: List[str], combine_stderr: bool) -> Union[CommandOutput, Failure]:
        try:
            return self.runner.run(command, combine_stderr=combine_stderr)
        except OSError as e:
            # Binary missing or not executable
            return Failure(
                kind=ErrorKind.EXECUTION_FAILED,
                detail=f"Could not run '{command[0]}': {e}",
            )
