from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Diagnostic:
    """A single report entry produced by an analysis pass."""

    level: str
    message: str
    line: Optional[int]
    column: Optional[int]
    file: Optional[str] = None
    check: Optional[str] = None
    code: Optional[str] = None

    def location(self) -> str:
        """``file:line:column`` with missing parts left out."""
        parts = [self.file or "(unknown)"]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for reporters."""
        return {
            "level": self.level,
            "message": self.message,
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "check": self.check,
        }


@dataclass(frozen=True)
class ListenerFault:
    """A listener handler that raised while processing one node."""

    listener: str
    event: Optional[str]
    phase: str
    line: Optional[int]
    error: str
