"""
Constant Resolver: maps a namespaced constant to the files that could define it.

``Foo::BarBaz`` is looked up as ``foo/bar_baz.rb``. When that yields nothing
the directory part is retried with dashes (``foo-bar/baz.rb`` for
``FooBar::Baz``). Only whole path segments match.
"""

import re
from collections.abc import Iterable
from typing import Optional

from ruby_semantic_linter.domain.config import ConfigurationError
from ruby_semantic_linter.domain.constants import (
    DEFAULT_EXTENSION,
    NAMESPACE_SEPARATOR,
    RUBY_DIRECTORIES,
)
from ruby_semantic_linter.domain.protocols import FileSystemProtocol
from ruby_semantic_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def snake_case(name: str) -> str:
    """``HTTPServer`` -> ``http_server``, ``FooBar`` -> ``foo_bar``."""
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.replace("-", "_").lower()


class ConstantResolver:
    """
    File inventory plus a per-constant cache of candidate paths.

    The inventory is globbed once, on the first scan. Directories are fixed
    for the resolver's lifetime.
    """

    def __init__(
        self,
        directories: Optional[Iterable[str]] = None,
        ignore: Optional[Iterable[str]] = None,
        extension: str = DEFAULT_EXTENSION,
        filesystem: Optional[FileSystemProtocol] = None,
    ) -> None:
        self.filesystem = filesystem or FileSystemGateway()

        if directories is None:
            directories = self.default_directories(self.filesystem)
        elif isinstance(directories, (str, bytes)) or not isinstance(directories, Iterable):
            raise ConfigurationError("Directories must be specified as an iterable of paths")

        if isinstance(ignore, str):
            ignore = (ignore,)

        self.directories: tuple[str, ...] = tuple(directories)
        self.ignore: tuple[str, ...] = tuple(ignore or ())
        self.extension = extension
        self._inventory: Optional[list[str]] = None
        self._constant_paths: dict[str, list[str]] = {}

    @staticmethod
    def default_directories(filesystem: FileSystemProtocol) -> list[str]:
        """The conventional source directories that exist below the current directory."""
        cwd = filesystem.current_directory()
        directories = []
        for name in RUBY_DIRECTORIES:
            path = filesystem.join_path(cwd, name)
            if filesystem.is_directory(path):
                directories.append(path)
        return directories

    @property
    def inventory(self) -> list[str]:
        if self._inventory is None:
            files: list[str] = []
            for directory in self.directories:
                files.extend(self.filesystem.glob_source_files(directory, self.extension))
            self._inventory = files
        return self._inventory

    def scan(self, constant: str) -> list[str]:
        """Candidate files for ``constant``, top level files first."""
        if constant not in self._constant_paths:
            self._constant_paths[constant] = self._build_paths(constant)
        return list(self._constant_paths[constant])

    def constant_to_path(self, constant: str) -> str:
        return snake_case(constant.replace(NAMESPACE_SEPARATOR, "/")) + self.extension

    def constant_to_dashed_path(self, constant: str) -> str:
        segments = constant.split(NAMESPACE_SEPARATOR)
        prefix = snake_case("/".join(segments[:-1])).replace("_", "-")
        if prefix:
            prefix += "/"
        return prefix + snake_case(segments[-1]) + self.extension

    def _build_paths(self, constant: str) -> list[str]:
        paths = self._match(self.constant_to_path(constant))
        if not paths:
            paths = self._match(self.constant_to_dashed_path(constant))

        resolved = {self.filesystem.resolve_path(path) for path in paths}
        kept = [path for path in resolved if not any(pattern in path for pattern in self.ignore)]
        return sorted(kept, key=lambda path: (len(path), path))

    def _match(self, segment: str) -> list[str]:
        suffix = "/" + segment
        return [path for path in self.inventory if path.replace("\\", "/").endswith(suffix)]
