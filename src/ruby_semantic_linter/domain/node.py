"""Uniform syntax node built from the upstream parser's raw records."""

from typing import Any, Optional, Union

from ruby_semantic_linter.domain.constants import TYPE_MAPPING

NodeValue = Union[None, str, int, float, bool, "Node", list[Any]]

RECORD_FIELDS: tuple[str, ...] = ("type", "name", "value", "key", "receiver", "line", "column", "code")


def normalize_type(tag: Optional[str]) -> Optional[str]:
    """Map a raw parser tag to its semantic kind. Unknown tags pass through."""
    if tag is None:
        return None
    return TYPE_MAPPING.get(tag, tag)


class Node:
    """
    A single syntax construct.

    ``type`` is the semantic kind, ``event`` the kind used for listener
    dispatch. Both start out equal; assigning ``type`` later (reclassification,
    e.g. a bare identifier proven to be a local variable) updates both.
    """

    def __init__(
        self,
        type: Optional[str] = None,
        name: Optional[str] = None,
        value: NodeValue = None,
        key: Union[None, "Node", list["Node"]] = None,
        receiver: Optional["Node"] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[str] = None,
    ) -> None:
        self.name = name
        self.value = _strip_absent(value)
        self.key = _as_group(key)
        self.receiver = receiver
        self.line = line
        self.column = column
        self.code = code
        self.used = False
        self.reported = False
        self._type: Optional[str] = None
        self._event: Optional[str] = None
        self.type = type

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Node":
        """Build a node (and its descendants) from a raw parse record."""
        fields = {name: record[name] for name in RECORD_FIELDS if name in record}
        for child_field in ("value", "key", "receiver"):
            if child_field in fields:
                fields[child_field] = _convert(fields[child_field])
        return cls(**fields)

    @property
    def type(self) -> Optional[str]:
        return self._type

    @type.setter
    def type(self, tag: Optional[str]) -> None:
        kind = normalize_type(tag)
        self._type = kind
        self._event = kind

    @property
    def event(self) -> Optional[str]:
        return self._event

    def child_nodes(self) -> list[list[Any]]:
        """
        Return the traversable groups of this node, each one as a list.

        Order: the receiver (sends, superclass of a class), the value, the key.
        Scalar values are not children; a single value or key node is wrapped.
        """
        nodes: list[list[Any]] = []

        if self.receiver is not None:
            nodes.append([self.receiver])

        if isinstance(self.value, list):
            nodes.append(self.value)
        elif isinstance(self.value, Node):
            nodes.append([self.value])

        if self.key:
            nodes.append(self.key)

        return nodes

    def children(self) -> list["Node"]:
        """Flatten ``child_nodes()`` to the Node entries only."""
        return [child for group in self.child_nodes() for child in group if isinstance(child, Node)]

    def arguments(self) -> list["Node"]:
        """Argument nodes heading the value of a method or block."""
        if not isinstance(self.value, list):
            return []
        return [child for child in self.value if isinstance(child, Node) and child.type == "argument"]

    def position(self) -> tuple[Optional[int], Optional[int]]:
        return (self.line, self.column)

    def __repr__(self) -> str:
        return f"Node({self._type!r}, name={self.name!r}, line={self.line!r})"


def _strip_absent(value: NodeValue) -> NodeValue:
    if isinstance(value, list):
        return [entry for entry in value if entry is not None]
    return value


def _as_group(key: Any) -> list[Any]:
    if isinstance(key, Node):
        return [key]
    if isinstance(key, list):
        return [entry for entry in key if entry is not None]
    return []


def _convert(raw: Any) -> Any:
    if isinstance(raw, dict):
        return Node.from_record(raw)
    if isinstance(raw, list):
        return [_convert(entry) for entry in raw if entry is not None]
    return raw
