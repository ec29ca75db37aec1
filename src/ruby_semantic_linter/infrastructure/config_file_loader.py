"""Load [tool.ruby-semantic-linter] from pyproject.toml. Infrastructure I/O only."""

import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib  # type: ignore[import-not-found]

TOOL_SECTION = "ruby-semantic-linter"


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml, walking up from the start directory.
    """

    @staticmethod
    def load_config_from_fs(start: Optional[str] = None) -> dict[str, object]:
        """Return the [tool.ruby-semantic-linter] table, empty when none is found."""
        current_path = Path(start).resolve() if start else Path.cwd()
        root_path = Path(current_path.anchor)
        empty: dict[str, object] = {}
        while True:
            config_file = current_path / "pyproject.toml"
            if config_file.exists():
                try:
                    with config_file.open("rb") as f:
                        data = toml_lib.load(f)
                    tool_section = data.get("tool", {}) or {}
                    return dict(tool_section.get(TOOL_SECTION, {}) or {})
                except OSError:
                    pass
            if current_path == root_path:
                return empty
            current_path = current_path.parent
