"""
Script resources and resource loaders

A script name is resolved by prefix:

- ``classpath:`` looks the path up in every ``sys.path`` directory, in order
- ``file:`` reads a file system path
- ``http:`` / ``https:`` downloads the script with httpx

Unprefixed names are read from the file system when the file exists and looked
up on the classpath otherwise.
"""

import io
from abc import ABC, abstractmethod
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol, TextIO

import httpx
from loguru import logger

from sqlscript.exceptions import ResourceLoaderError, ResourceNotFoundError

DEFAULT_ENCODING = "utf-8"


class Resource(Protocol):
    """A readable script source"""

    @property
    def path(self) -> str: ...

    @property
    def filename(self) -> str: ...

    def exists(self) -> bool: ...

    def open(self) -> TextIO:
        """Open the resource as a text stream; the caller closes it."""
        ...


@dataclass(frozen=True)
class FileResource:
    """Script stored on the file system"""

    file: Path
    encoding: str = DEFAULT_ENCODING

    @property
    def path(self) -> str:
        return str(self.file)

    @property
    def filename(self) -> str:
        return self.file.name

    def exists(self) -> bool:
        return self.file.is_file()

    def open(self) -> TextIO:
        return self.file.open("r", encoding=self.encoding)


@dataclass(frozen=True)
class UrlResource:
    """Script served over HTTP(S)

    Attributes:
        url: Script URL
        client: httpx client used for requests (a one-off request is made when None)
    """

    url: str
    client: httpx.Client | None = field(default=None, compare=False, repr=False)

    @property
    def path(self) -> str:
        return self.url

    @property
    def filename(self) -> str:
        return httpx.URL(self.url).path.rsplit("/", 1)[-1]

    def _request(self, method: str) -> httpx.Response:
        if self.client is not None:
            return self.client.request(method, self.url)
        return httpx.request(method, self.url, follow_redirects=True)

    def exists(self) -> bool:
        return self._request("HEAD").is_success

    def open(self) -> TextIO:
        response = self._request("GET")
        response.raise_for_status()
        return io.StringIO(response.text, newline=None)


class _LoaderStrategy(ABC):
    """Resolve resource names starting with one of the given prefixes"""

    def __init__(self, *prefixes: str) -> None:
        self.prefixes = prefixes

    def extract_prefix(self, name: str) -> str | None:
        lower_name = name.lower()
        for prefix in self.prefixes:
            if lower_name.startswith(prefix):
                return prefix
        return None

    def strip_prefix(self, name: str) -> str:
        prefix = self.extract_prefix(name)
        return name[len(prefix) :] if prefix else name

    def match(self, name: str) -> bool:
        _check_name(name)
        return self.extract_prefix(name) is not None

    def load(self, name: str) -> Resource:
        _check_name(name)
        try:
            resource = self.do_load(name)
            found = resource.exists()
        except ResourceNotFoundError:
            raise
        except Exception as e:
            logger.error("Failed to load resource {}: {}", name, e)
            raise ResourceLoaderError(f"Cannot load resource '{name}': {e}") from e

        if not found:
            raise ResourceNotFoundError(name)

        logger.debug("Resolved resource {} to {}", name, resource.path)
        return resource

    @abstractmethod
    def do_load(self, name: str) -> Resource:
        """Build the resource for `name`, without checking that it exists."""


class _ClasspathStrategy(_LoaderStrategy):
    def do_load(self, name: str) -> Resource:
        relative = self.strip_prefix(name).lstrip("/")
        for entry in sys.path:
            candidate = Path(entry or ".") / relative
            if candidate.is_file():
                return FileResource(candidate)
        raise ResourceNotFoundError(name)


class _FileSystemStrategy(_LoaderStrategy):
    def do_load(self, name: str) -> Resource:
        return FileResource(Path(self.strip_prefix(name)))


class _UrlStrategy(_LoaderStrategy):
    def do_load(self, name: str) -> Resource:
        return UrlResource(name)


class ResourceLoader(Enum):
    """Available resource loading strategies"""

    CLASSPATH = _ClasspathStrategy("classpath:")
    FILE_SYSTEM = _FileSystemStrategy("file:")
    URL = _UrlStrategy("http:", "https:")

    def match(self, name: str) -> bool:
        return self.value.match(name)

    def load(self, name: str) -> Resource:
        """Load a resource.

        Raises:
            ValueError: If name is blank
            ResourceNotFoundError: If the resource does not exist
            ResourceLoaderError: If loading fails for any other reason
        """
        return self.value.load(name)

    @classmethod
    def find(cls, name: str) -> "ResourceLoader | None":
        """Return the loader whose prefix starts `name`, or None."""
        for loader in cls:
            if loader.match(name):
                return loader
        return None


def load_resource(name: str) -> Resource:
    """Resolve a script name to a resource (see module docstring for the rules)."""
    _check_name(name)
    loader = ResourceLoader.find(name)
    if loader is None:
        loader = ResourceLoader.FILE_SYSTEM if Path(name).is_file() else ResourceLoader.CLASSPATH
    return loader.load(name)


def _check_name(name: str) -> None:
    if not name or name.isspace():
        raise ValueError("Resource name must be defined")
