"""Hook Results - What one invocation reports, and how it reaches the host."""

import json
import sys
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

from autocommit_hook import HOOK_NAME
from autocommit_hook.output import print_error, print_info

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_BLOCK = 2  # Host framework feeds stderr back to the agent


@dataclass
class HookResult:
    """Plain success or error."""
    success: bool
    message: Optional[str] = None
    data: Optional[dict[str, Any]] = None
    error: Optional[str] = None
    hook: str = HOOK_NAME

    @classmethod
    def ok(cls, message: str, data: Optional[dict[str, Any]] = None) -> 'HookResult':
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, error: str) -> 'HookResult':
        return cls(success=False, error=error)

    def to_dict(self) -> dict:
        return {k: v for k, v in {
            "success": self.success,
            "hook": self.hook,
            "message": self.message,
            "data": self.data,
            "error": self.error,
        }.items() if v is not None}


@dataclass
class HookDecision:
    """Policy outcome: block the agent with a reason, or approve."""
    decision: Literal["block", "approve"]
    reason: str = ""
    hook: str = field(default=HOOK_NAME)

    @classmethod
    def block(cls, reason: str) -> 'HookDecision':
        return cls(decision="block", reason=reason)

    @classmethod
    def approve(cls, reason: str = "") -> 'HookDecision':
        return cls(decision="approve", reason=reason)

    def to_dict(self) -> dict:
        return {"decision": self.decision, "reason": self.reason, "hook": self.hook}


def emit_result(result: HookResult | HookDecision, verbose: bool = False) -> int:
    """Write the result to stdout/stderr and return the process exit code."""
    if isinstance(result, HookDecision):
        if result.decision == "block":
            print(result.reason, file=sys.stderr)
            return EXIT_BLOCK
        print(json.dumps(result.to_dict()))
        return EXIT_OK

    if not result.success:
        print_error(result.error or "Unknown error")
        return EXIT_ERROR

    if result.data is not None:
        print(json.dumps(result.to_dict()))
    elif verbose and result.message:
        print_info(result.message)
    return EXIT_OK
