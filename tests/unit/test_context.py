"""
Unit tests for sqlscript.core.context
"""

import pytest
from loguru import logger

from sqlscript.core.context import ParserContext
from sqlscript.core.states import ParserState
from sqlscript.exceptions import SqlParserError


def _append_all(ctx: ParserContext, text: str) -> None:
    for character in text:
        ctx.append(character)


class TestParserContext:
    """Tests for ParserContext state transitions and flush"""

    def test_new_context(self) -> None:
        ctx = ParserContext()

        assert ctx.state is ParserState.DEFAULT
        assert ctx.open_quote is None
        assert ctx.statements == []
        assert ctx.query == ""

    def test_start_and_stop_varchar(self) -> None:
        ctx = ParserContext()

        ctx.start_varchar("'")
        assert ctx.state is ParserState.VARCHAR
        assert ctx.open_quote == "'"

        ctx.stop_varchar()
        assert ctx.state is ParserState.DEFAULT
        assert ctx.open_quote is None

    def test_start_and_stop_block_comment(self) -> None:
        ctx = ParserContext()

        ctx.start_block_comment()
        assert ctx.state is ParserState.BLOCK_COMMENT
        assert ctx.open_quote is None

        ctx.stop_block_comment()
        assert ctx.state is ParserState.DEFAULT

    def test_escaping_returns_to_open_literal(self) -> None:
        ctx = ParserContext()
        ctx.start_varchar('"')

        ctx.start_escaping()
        assert ctx.state is ParserState.ESCAPE
        assert ctx.open_quote == '"'

        ctx.stop_escaping()
        assert ctx.state is ParserState.VARCHAR
        assert ctx.open_quote == '"'

    def test_flush_adds_statement(self) -> None:
        ctx = ParserContext()
        _append_all(ctx, "DROP TABLE foo;")

        assert ctx.statements == []
        ctx.flush()

        assert ctx.statements == ["DROP TABLE foo;"]
        assert ctx.query == ""

    def test_flush_trims_statement(self) -> None:
        ctx = ParserContext()
        _append_all(ctx, "  DROP TABLE foo;  ")

        ctx.flush()

        assert ctx.statements == ["DROP TABLE foo;"]

    def test_flush_drops_blank_statement(self) -> None:
        ctx = ParserContext()
        _append_all(ctx, "DROP TABLE foo;")
        ctx.flush()

        _append_all(ctx, "  \t ")
        ctx.flush()

        assert ctx.statements == ["DROP TABLE foo;"]

    def test_flush_keeps_order(self) -> None:
        ctx = ParserContext()
        for statement in ("A;", "B;", "C;"):
            _append_all(ctx, statement)
            ctx.flush()

        assert ctx.statements == ["A;", "B;", "C;"]

    def test_flush_resets_state(self) -> None:
        ctx = ParserContext()
        ctx.start_varchar("'")
        ctx.stop_varchar()
        _append_all(ctx, "x")

        ctx.flush()

        assert ctx.state is ParserState.DEFAULT
        assert ctx.open_quote is None
        assert ctx.query == ""

    @pytest.mark.parametrize(
        "enter",
        [
            lambda ctx: ctx.start_varchar("'"),
            lambda ctx: ctx.start_block_comment(),
            lambda ctx: ctx.start_escaping(),
        ],
    )
    def test_flush_outside_default_state_fails(self, enter) -> None:
        ctx = ParserContext()
        _append_all(ctx, "SELECT 'abc")
        enter(ctx)

        with pytest.raises(SqlParserError, match="Cannot flush query: SELECT 'abc") as exc_info:
            ctx.flush()

        assert exc_info.value.query == "SELECT 'abc"
        assert ctx.statements == []

    def test_statements_are_a_copy(self) -> None:
        ctx = ParserContext()
        _append_all(ctx, "A;")
        ctx.flush()

        ctx.statements.append("B;")

        assert ctx.statements == ["A;"]

    def test_flush_logs_added_statement(self) -> None:
        messages: list[str] = []
        sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            ctx = ParserContext()
            _append_all(ctx, "DROP TABLE foo;")
            ctx.flush()
        finally:
            logger.remove(sink_id)

        assert any("Add pending query: DROP TABLE foo;" in message for message in messages)
