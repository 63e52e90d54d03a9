"""Result envelope returned by every PostService operation.

Failures are values, not exceptions: the CLI inspects ``ok`` to choose
stdout or stderr and the exit status, and ``--json`` dumps the envelope
as-is.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` plus a readable message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        ok: False when ``error`` is set.
        op: Operation name, used to pick a renderer (e.g. ``"search"``).
        data: Payload of a successful call.
        warnings: Problems that did not stop the operation.
        error: Set only on failure.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any] | None = None) -> ServiceResult:
        return cls(ok=True, op=op, data=data or {})

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
