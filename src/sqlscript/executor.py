"""
SQL Script Executor

Executes parsed SQL statements against a DB-API 2.0 connection (PEP 249).
Execution is fail-fast: the first failing statement's error propagates
unchanged and the remaining statements are not executed.
"""

import time
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Protocol

from loguru import logger

from .core.configuration import ParserConfiguration
from .core.parser import parse_script
from .models import ExecutionResult, SqlScript

if TYPE_CHECKING:
    from .core.parser import ScriptSource
    from .resources import Resource


class Cursor(Protocol):
    def execute(self, operation: str) -> Any: ...

    def close(self) -> Any: ...


class Connection(Protocol):
    """Subset of the DB-API connection interface used by the executor"""

    def cursor(self) -> Cursor: ...

    def commit(self) -> Any: ...

    def close(self) -> Any: ...


def execute_statements(
    connection: Connection, statements: Sequence[str], *, commit: bool = True
) -> ExecutionResult:
    """Execute statements in order, as a single batch on one cursor.

    Args:
        connection: Open DB-API connection
        statements: Statements to execute
        commit: Commit the connection once every statement succeeded

    Returns:
        ExecutionResult describing the executed batch

    Raises:
        Exception: Whatever the driver raises for the first failing statement
    """
    start_time = time.time()
    total = len(statements)
    if total == 0:
        return ExecutionResult(total_statements=0)

    if total == 1:
        logger.debug("Executing query: {}", statements[0])
    else:
        logger.debug("Executing batch with #{} queries", total)

    cursor = connection.cursor()
    try:
        for i, sql in enumerate(statements, 1):
            logger.debug("Executing statement {}/{}: {}", i, total, sql)
            try:
                cursor.execute(sql)
            except Exception:
                logger.error("Error while executing statement {}/{}: {}", i, total, sql)
                raise
    finally:
        cursor.close()

    if commit:
        connection.commit()

    total_time_ms = int((time.time() - start_time) * 1000)
    logger.debug("Executed {} statements in {}ms", total, total_time_ms)
    return ExecutionResult(
        total_statements=total,
        execution_time_ms=total_time_ms,
        statements=list(statements),
    )


def execute_script(
    connection: Connection,
    source: "ScriptSource | Resource",
    configuration: ParserConfiguration | None = None,
    *,
    commit: bool = True,
) -> ExecutionResult:
    """Parse a script and execute its statements on `connection`.

    Nothing is executed when the script cannot be parsed.
    """
    statements = parse_script(source, configuration)
    return execute_statements(connection, statements, commit=commit)


class ScriptRunner:
    """Run SQL scripts on connections obtained from a factory

    Attributes:
        connection_factory: Callable returning a new open DB-API connection
        configuration: Parser configuration used for every script
    """

    def __init__(
        self,
        connection_factory: Callable[[], Connection],
        configuration: ParserConfiguration | None = None,
    ) -> None:
        self.connection_factory = connection_factory
        self.configuration = configuration or ParserConfiguration.default()

    def parse(self, source: "ScriptSource | Resource") -> SqlScript:
        return SqlScript.parse(source, self.configuration)

    def run(self, source: "ScriptSource | Resource") -> ExecutionResult:
        """Parse `source`, then execute it on a fresh connection closed afterwards."""
        script = self.parse(source)
        connection = self.connection_factory()
        try:
            return execute_statements(connection, script.statements)
        finally:
            connection.close()
