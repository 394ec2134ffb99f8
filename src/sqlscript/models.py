"""
Pydantic models for parsed scripts and execution results.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from .core.configuration import ParserConfiguration
from .core.parser import parse_script

if TYPE_CHECKING:
    from .core.parser import ScriptSource
    from .resources import Resource


class SqlScript(BaseModel):
    """Statements of one parsed SQL script"""

    model_config = ConfigDict(frozen=True)

    statements: list[str] = Field(default_factory=list, description="Parsed statements, in order")

    @classmethod
    def parse(
        cls,
        source: "ScriptSource | Resource",
        configuration: ParserConfiguration | None = None,
    ) -> "SqlScript":
        """Parse a script source (stream, path, resource or resource name)."""
        return cls(statements=parse_script(source, configuration))

    def __len__(self) -> int:
        return len(self.statements)


class ExecutionResult(BaseModel):
    """Result of a successful script execution

    Attributes:
        total_statements: Number of statements executed
        execution_time_ms: Total execution time in milliseconds
        statements: Executed statements, in order
    """

    total_statements: int = Field(..., description="Total statements")
    execution_time_ms: int = Field(default=0, description="Total execution time (ms)")
    statements: list[str] = Field(default_factory=list, description="Executed statements")
