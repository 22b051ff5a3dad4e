from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Optional


class ErrorPolicy(str, Enum):
    fail = "fail"
    skip = "skip"
    partial = "partial"


@dataclasses.dataclass(slots=True, frozen=True)
class FieldResult:
    line: int
    output: bytes
    error: Optional[str] = None

    def to_json(self) -> dict:
        return dict(line=self.line,
                    output=self.output.decode("utf-8", errors="backslashreplace"),
                    error=self.error)


@dataclasses.dataclass(slots=True, frozen=True)
class BenchResult:
    name: str
    iterations: int
    total_s: float
    ns_per_op: float
