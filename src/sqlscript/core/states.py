"""
Parser state machine

Four states, one handler per state. Each handler receives the current line,
the position of the character to handle, the parser context and the parser
configuration, and returns the position the caller resumes from (the caller
moves one character further after each call).
"""

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlscript.core.configuration import ParserConfiguration
    from sqlscript.core.context import ParserContext

QUOTES = ("'", '"')
BACKSLASH = "\\"
DOUBLED_SINGLE_QUOTE = "''"


class ParserState(Enum):
    """Parsing state of the current character"""

    DEFAULT = "default"
    VARCHAR = "varchar"
    BLOCK_COMMENT = "block_comment"
    ESCAPE = "escape"

    def handle(
        self,
        line: str,
        position: int,
        ctx: "ParserContext",
        configuration: "ParserConfiguration",
    ) -> int:
        """Handle the character at `position` and return the position to resume from."""
        return _HANDLERS[self](line, position, ctx, configuration)


def handle_default(
    line: str, position: int, ctx: "ParserContext", configuration: "ParserConfiguration"
) -> int:
    """Handle a character outside literals and comments.

    - Line comment: the rest of the line is skipped.
    - Block comment start: the marker is skipped and a block comment starts.
    - Quote: appended, a literal starts.
    - Delimiter: appended, the pending statement is flushed.
    - Anything else is appended.
    """
    if line.startswith(configuration.line_comment, position):
        return len(line) + 1

    if line.startswith(configuration.start_block_comment, position):
        ctx.start_block_comment()
        return position + len(configuration.start_block_comment) - 1

    character = line[position]
    ctx.append(character)
    if character in QUOTES:
        ctx.start_varchar(character)
    elif character == configuration.delimiter:
        ctx.flush()

    return position


def handle_varchar(
    line: str, position: int, ctx: "ParserContext", configuration: "ParserConfiguration"
) -> int:
    """Handle a character inside a quoted literal.

    A backslash or a doubled single quote escapes the next character; the open
    quote closes the literal.
    """
    character = line[position]
    ctx.append(character)

    if character == BACKSLASH or line.startswith(DOUBLED_SINGLE_QUOTE, position):
        ctx.start_escaping()
    elif character == ctx.open_quote:
        ctx.stop_varchar()

    return position


def handle_escape(
    line: str, position: int, ctx: "ParserContext", configuration: "ParserConfiguration"
) -> int:
    """Append the escaped character whatever it is, then go back to the literal."""
    ctx.append(line[position])
    ctx.stop_escaping()
    return position


def handle_block_comment(
    line: str, position: int, ctx: "ParserContext", configuration: "ParserConfiguration"
) -> int:
    """Ignore commented characters until the end marker is found."""
    if line.startswith(configuration.end_block_comment, position):
        ctx.stop_block_comment()
        return position + len(configuration.end_block_comment) - 1

    return position


StateHandler = Callable[[str, int, "ParserContext", "ParserConfiguration"], int]

_HANDLERS: dict[ParserState, StateHandler] = {
    ParserState.DEFAULT: handle_default,
    ParserState.VARCHAR: handle_varchar,
    ParserState.ESCAPE: handle_escape,
    ParserState.BLOCK_COMMENT: handle_block_comment,
}
