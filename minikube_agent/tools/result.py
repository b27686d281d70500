# minikube_agent/tools/result.py
"""
Tool Results

Every tool returns one of two values: Success carrying a payload, or Failure
carrying an error kind and the diagnostic detail. Results are plain values;
failures never travel as exceptions across the dispatch boundary.

to_dict() turns a result into the envelope sent back over JSON-RPC. The
envelope always has a 'success' key, like every other tool result in this
project.
"""

import json
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    """The closed set of ways a tool call can fail."""

    # The requested tool name is not in the registry (caller error)
    UNKNOWN_OPERATION = "UnknownOperation"
    # The external command exited non-zero or could not be launched
    EXECUTION_FAILED = "ExecutionFailed"
    # The command succeeded but its structured output could not be decoded
    MALFORMED_OUTPUT = "MalformedOutput"


class Success(BaseModel):
    """
    Successful tool outcome.

    The payload is either the captured text of the command, or a pydantic
    model (e.g. ClusterStatus) for structured queries.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    payload: Any

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        if isinstance(self.payload, BaseModel):
            data = self.payload.model_dump(by_alias=True)
            return {
                "success": True,
                "output": json.dumps(data, indent=2),
                "data": data,
            }
        return {"success": True, "output": self.payload}


class Failure(BaseModel):
    """
    Failed tool outcome.

    detail holds the most useful diagnostic available: for a failed command
    that is the tool's own output, unmodified. raw_output keeps undecodable
    bytes around for MalformedOutput.
    """
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    detail: str
    raw_output: Optional[str] = None
    exit_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "success": False,
            "error_kind": self.kind.value,
            "error": self.detail,
        }
        if self.raw_output is not None:
            result["raw_output"] = self.raw_output
        if self.exit_code is not None:
            result["exit_code"] = self.exit_code
        return result


ToolResult = Union[Success, Failure]
