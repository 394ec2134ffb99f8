"""
sqlscript CLI Commands

Command implementations for the sqlscript CLI. The CLI layer (cli.py) only
routes options to these functions and prints their results.
"""

from .execute import ExecuteError, execute_sql_script
from .split import SplitError, render_statements, split_script, write_statements

__all__ = [
    "execute_sql_script",
    "ExecuteError",
    "split_script",
    "render_statements",
    "write_statements",
    "SplitError",
]
