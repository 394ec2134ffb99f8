"""
Parser configuration

Lexical conventions recognized by the SQL script parser: statement delimiter,
line comment marker and block comment markers.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_DELIMITER = ";"
DEFAULT_LINE_COMMENT = "--"
DEFAULT_START_BLOCK_COMMENT = "/*"
DEFAULT_END_BLOCK_COMMENT = "*/"


class ParserConfiguration(BaseModel):
    """Immutable parser configuration

    Attributes:
        delimiter: Character ending a statement (outside literals and comments)
        line_comment: Marker starting a comment running to the end of the line
        start_block_comment: Marker opening a (possibly multi-line) comment
        end_block_comment: Marker closing a block comment
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    delimiter: str = Field(default=DEFAULT_DELIMITER, description="SQL statement delimiter")
    line_comment: str = Field(
        default=DEFAULT_LINE_COMMENT, alias="lineComment", description="Line comment marker"
    )
    start_block_comment: str = Field(
        default=DEFAULT_START_BLOCK_COMMENT,
        alias="startBlockComment",
        description="Block comment start marker",
    )
    end_block_comment: str = Field(
        default=DEFAULT_END_BLOCK_COMMENT,
        alias="endBlockComment",
        description="Block comment end marker",
    )

    @field_validator("delimiter")
    @classmethod
    def check_delimiter(cls, value: str) -> str:
        if not value or value.isspace():
            raise ValueError("SQL delimiter must be defined")
        if len(value) != 1:
            raise ValueError(f"SQL delimiter must be a single character, got {value!r}")
        return value

    @field_validator("line_comment")
    @classmethod
    def check_line_comment(cls, value: str) -> str:
        if not value or value.isspace():
            raise ValueError("Pattern for line comment start must be defined")
        return value

    @field_validator("start_block_comment")
    @classmethod
    def check_start_block_comment(cls, value: str) -> str:
        if not value or value.isspace():
            raise ValueError("Pattern for block comment start must be defined")
        return value

    @field_validator("end_block_comment")
    @classmethod
    def check_end_block_comment(cls, value: str) -> str:
        if not value or value.isspace():
            raise ValueError("Pattern for block comment end must be defined")
        return value

    @classmethod
    def default(cls) -> "ParserConfiguration":
        """Return the shared default configuration (`;`, `--`, `/*`, `*/`)."""
        return _DEFAULT

    def replace(self, **changes: Any) -> "ParserConfiguration":
        """Return a new validated configuration with some fields overridden.

        Unset (None) values are ignored, so CLI options can be passed through as-is.
        """
        values = self.model_dump()
        values.update({key: value for key, value in changes.items() if value is not None})
        return ParserConfiguration(**values)

    def __str__(self) -> str:
        return (
            f"ParserConfiguration{{delimiter={self.delimiter}, "
            f"lineComment={self.line_comment}, "
            f"startBlockComment={self.start_block_comment}, "
            f"endBlockComment={self.end_block_comment}}}"
        )


_DEFAULT = ParserConfiguration()
