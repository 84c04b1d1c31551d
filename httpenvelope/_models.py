from __future__ import annotations

import json
import typing
from dataclasses import dataclass, field


@dataclass
class Invocation:
    """One parsed command line: everything needed to send a single request."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""


@dataclass
class ResultEnvelope:
    """The JSON document printed for every invocation.

    Either ``status``, ``headers`` and ``body`` are populated (a response was
    received) or ``error`` is (nothing usable came back). The two halves are
    never emitted together.
    """

    status: int | None = None
    headers: dict[str, list[str]] | None = None
    body: str | None = None
    error: str | None = None

    @classmethod
    def success(
        cls, status: int, headers: dict[str, list[str]], body: str
    ) -> ResultEnvelope:
        return cls(status=status, headers=headers, body=body)

    @classmethod
    def failure(cls, error: str) -> ResultEnvelope:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return not self.error

    def to_dict(self) -> dict[str, typing.Any]:
        if self.error:
            return {"error": self.error}
        return {
            "status": self.status,
            "headers": self.headers if self.headers is not None else {},
            "body": self.body if self.body is not None else "",
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)
