"""Node source over JSON dumps written by the external Ruby parser."""

import json
from typing import Any, Optional

from ruby_semantic_linter.domain.node import Node
from ruby_semantic_linter.domain.protocols import FileSystemProtocol, NodeSourceProtocol
from ruby_semantic_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway

DUMP_SUFFIX = ".json"


class JsonTreeGateway(NodeSourceProtocol):
    """
    Reads a list of raw node records from a ``.json`` dump.

    Source paths are mapped to the dump stored beside them, so ``lib/foo.rb``
    is read from ``lib/foo.rb.json``. A top level object with a ``nodes`` key
    is accepted as well as a bare list.
    """

    def __init__(self, filesystem: Optional[FileSystemProtocol] = None) -> None:
        self.filesystem = filesystem or FileSystemGateway()

    def dump_path(self, path: str) -> str:
        return path if path.endswith(DUMP_SUFFIX) else path + DUMP_SUFFIX

    def load_nodes(self, path: str) -> list[Node]:
        dump = self.dump_path(path)
        text = self.filesystem.read_text(dump)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as error:
            raise ValueError(f"Malformed node dump {dump}: {error}") from error
        return self.parse_records(data, dump)

    @staticmethod
    def parse_records(data: Any, source: str = "<dump>") -> list[Node]:
        """Convert decoded JSON into nodes; non-object entries are skipped."""
        if isinstance(data, dict):
            data = data.get("nodes")
        if not isinstance(data, list):
            raise ValueError(f"Node dump {source} must contain a list of records")
        return [Node.from_record(record) for record in data if isinstance(record, dict)]
