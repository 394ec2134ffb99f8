"""
Parser context: mutable state of a single parsing run.
"""

from loguru import logger

from sqlscript.core.states import ParserState
from sqlscript.exceptions import SqlParserError


class ParserContext:
    """Accumulates characters and completed statements while a script is parsed.

    One instance per parsing run; instances are never shared.

    Attributes:
        state: State handling the next character
        open_quote: Quote character that will close the current literal (if any)
    """

    def __init__(self) -> None:
        self._statements: list[str] = []
        self._buffer: list[str] = []
        self.open_quote: str | None = None
        self.state = ParserState.DEFAULT

    def _reset(self) -> None:
        self._buffer = []
        self.open_quote = None
        self.state = ParserState.DEFAULT

    @property
    def statements(self) -> list[str]:
        """Statements completed so far, in order (a copy)."""
        return list(self._statements)

    @property
    def query(self) -> str:
        """Statement currently being assembled."""
        return "".join(self._buffer)

    def append(self, character: str) -> None:
        self._buffer.append(character)

    def start_escaping(self) -> None:
        self.state = ParserState.ESCAPE

    def stop_escaping(self) -> None:
        # Escaping only happens inside a literal, which stays open.
        self.state = ParserState.VARCHAR

    def start_block_comment(self) -> None:
        self.state = ParserState.BLOCK_COMMENT

    def stop_block_comment(self) -> None:
        self.state = ParserState.DEFAULT

    def start_varchar(self, quote: str) -> None:
        self.open_quote = quote
        self.state = ParserState.VARCHAR

    def stop_varchar(self) -> None:
        self.open_quote = None
        self.state = ParserState.DEFAULT

    def flush(self) -> None:
        """Close the pending statement and reset for the next one.

        Blank statements are dropped silently.

        Raises:
            SqlParserError: If a literal or a block comment is still open
        """
        pending = self.query
        if self.state is not ParserState.DEFAULT:
            raise SqlParserError(f"Cannot flush query: {pending}", query=pending)

        statement = pending.strip()
        if statement:
            logger.debug("Add pending query: {}", statement)
            self._statements.append(statement)

        self._reset()
