"""
Split Command

Parses a SQL script and renders its statements.
"""

import json
from pathlib import Path

import httpx

from sqlscript.core.configuration import ParserConfiguration
from sqlscript.core.parser import parse_script
from sqlscript.exceptions import SqlScriptError


class SplitError(Exception):
    """Raised when a script cannot be split into statements"""


def split_script(source: str, configuration: ParserConfiguration | None = None) -> list[str]:
    """Parse a script given by name (file path, classpath: or URL).

    Raises:
        SplitError: If the script cannot be loaded or parsed
    """
    try:
        return parse_script(source, configuration)
    except (SqlScriptError, ValueError) as e:
        raise SplitError(str(e)) from e
    except httpx.HTTPError as e:
        raise SplitError(f"Cannot download script: {e}") from e


def render_statements(statements: list[str], *, as_json: bool = False) -> str:
    """Render statements as a JSON array, or one statement per block of lines."""
    if as_json:
        return json.dumps(statements, indent=2)
    return "\n\n".join(statements) + ("\n" if statements else "")


def write_statements(statements: list[str], output: Path, *, as_json: bool = False) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_statements(statements, as_json=as_json), encoding="utf-8")
