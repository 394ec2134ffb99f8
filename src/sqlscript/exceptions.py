"""
Exceptions raised while loading and parsing SQL scripts
"""


class SqlScriptError(Exception):
    """Base exception for sqlscript errors"""


class SqlParserError(SqlScriptError):
    """Raised when a script cannot be parsed

    Attributes:
        query: Statement being assembled when parsing failed (if any)
    """

    def __init__(self, message: str, query: str | None = None):
        self.query = query
        super().__init__(message)


class ResourceNotFoundError(SqlScriptError):
    """Raised when a script resource does not exist"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Resource '{path}' does not exist")


class ResourceLoaderError(SqlScriptError):
    """Raised when a resource loader fails unexpectedly"""
