from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ruby_semantic_linter.domain.definitions import Definition
    from ruby_semantic_linter.domain.node import Node


class TelemetryPort(Protocol):
    """Protocol for progress and problem reporting."""

    def step(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...


class ConstantResolverProtocol(Protocol):
    """Maps a namespaced constant name to the files that could define it."""

    def scan(self, constant: str) -> list[str]:
        """Absolute candidate paths, top level files first."""
        ...


class NodeSourceProtocol(Protocol):
    """Produces node trees for source files (the external parser's output)."""

    def load_nodes(self, path: str) -> list["Node"]:
        """Return the top level nodes for ``path``."""
        ...


class StubAuthorityProtocol(Protocol):
    """Builds the shared core library root."""

    def build_root(self) -> "Definition":
        """Replay every core definition script into a new, frozen root."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        ...

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        ...

    def glob_source_files(self, path: str, extension: str) -> list[str]:
        """All files below ``path`` whose name ends in ``extension``."""
        ...

    def exists(self, path: str) -> bool:
        """Check if path exists."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def join_path(self, *paths: str) -> str:
        """Join path components into a single path string."""
        ...

    def current_directory(self) -> str:
        """The process working directory."""
        ...
