"""Type aliases and the structured trap report.

TrapReport is the diagnostic payload carried by every panic. Uses Pydantic for
validation/serialization so reports can be logged or dumped as JSON unchanged.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Field

# JSON type aliases - using Any for recursive types to avoid Pydantic resolution issues
JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]


class ErrorCode(StrEnum):
    """Classification of every failure the result family can signal."""
    CONSUMED_VALUE = "CONSUMED_VALUE"
    WRONG_VARIANT = "WRONG_VARIANT"
    DANGLING_REFERENCE = "DANGLING_REFERENCE"
    UNWRAP_ON_ERR = "UNWRAP_ON_ERR"


class TrapReport(BaseModel):
    """Structured description of a fatal trap.

    Attributes:
        code: Machine-readable classification
        message: Human-readable diagnostic (caller-supplied for expect())
        condition: Source text of the violated condition, if any
        location: "<file> line <n>" of the first frame outside the library
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        extra="forbid",
        json_schema_extra={
            "title": "Trap Report",
            "examples": [{
                "code": "UNWRAP_ON_ERR",
                "message": "called unwrap() on Err: 'bad'",
                "condition": "self.is_ok()",
                "location": "app.py line 12",
            }],
        },
    )

    code: ErrorCode
    message: Annotated[str, Field(min_length=1)]
    condition: str | None = None
    location: str = Field(default="", repr=False)

    def render(self) -> str:
        """Format as `Assertion <condition> failed in <location>: <message>`."""
        head = f"Assertion {self.condition} failed" if self.condition else f"Trap {self.code}"
        loc = f" in {self.location}" if self.location else ""
        return f"{head}{loc}: {self.message}"

    __str__ = render
