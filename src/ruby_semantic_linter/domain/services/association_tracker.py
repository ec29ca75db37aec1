"""
Semantic pass: builds the definition registry and links nodes to definitions.

Nothing is executed. Every expression the walker understands is associated
with its best-effort definition; anything it cannot say something about is
associated with ``UNKNOWN``.
"""

import logging
from typing import Any, Iterator, Optional

from ruby_semantic_linter.domain.constants import (
    BRANCH_KINDS,
    COMPARISON_OPERATORS,
    LITERAL_TYPES,
    NAMESPACE_SEPARATOR,
    ROOT_NAME,
)
from ruby_semantic_linter.domain.definitions import (
    CONSTANT_KINDS,
    UNKNOWN,
    Definition,
    DefinitionKind,
)
from ruby_semantic_linter.domain.iterator import HandlerPair, Listener, TreeIterator
from ruby_semantic_linter.domain.node import Node
from ruby_semantic_linter.domain.protocols import (
    ConstantResolverProtocol,
    NodeSourceProtocol,
    TelemetryPort,
)
from ruby_semantic_linter.domain.registry import DefinitionRegistry, kind_for_name

READ_KINDS: dict[str, DefinitionKind] = {
    "local_variable": DefinitionKind.LOCAL_VARIABLE,
    "instance_variable": DefinitionKind.INSTANCE_VARIABLE,
    "class_variable": DefinitionKind.CLASS_VARIABLE,
    "global_variable": DefinitionKind.GLOBAL_VARIABLE,
}

ARGUMENT_PREFIXES = "*&"

# Bound on value chains followed when dereferencing (a = b = c = ...).
MAX_DEREFERENCE = 16


class AssociationMap:
    """Node identity to value. Keeps the keyed nodes alive so ids stay unique."""

    def __init__(self) -> None:
        self._entries: dict[int, tuple[Node, Any]] = {}

    def __setitem__(self, node: Node, value: Any) -> None:
        self._entries[id(node)] = (node, value)

    def __getitem__(self, node: Node) -> Any:
        entry = self._entries.get(id(node))
        if entry is None:
            raise KeyError(node)
        return entry[1]

    def __contains__(self, node: object) -> bool:
        return id(node) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, node: Optional[Node], default: Any = None) -> Any:
        if node is None:
            return default
        entry = self._entries.get(id(node))
        return entry[1] if entry is not None else default

    def nodes(self) -> Iterator[Node]:
        return (node for node, _ in self._entries.values())


def dereference(definition: Optional[Definition]) -> Optional[Definition]:
    """Follow variables and value-carrying constants to the value they hold."""
    current = definition
    for _ in range(MAX_DEREFERENCE):
        if current is None:
            return None
        if current.is_variable() or (current.kind == DefinitionKind.CONSTANT and current.value is not None):
            current = current.value
            continue
        return current
    return None


class AssociationTracker(Listener):
    """
    The non-executing walker.

    Constructed against a registry (a fresh one over an empty ``Object`` root
    when none is given). With a resolver, unresolved constants are looked up
    on disk; with a node source as well, candidate files are loaded once and
    walked into the root frame by a nested tracker sharing this one's state.
    """

    def __init__(
        self,
        report: Any = None,
        registry: Optional[DefinitionRegistry] = None,
        resolver: Optional[ConstantResolverProtocol] = None,
        node_source: Optional[NodeSourceProtocol] = None,
        telemetry: Optional[TelemetryPort] = None,
        loaded_files: Optional[set[str]] = None,
        scanned: Optional[set[str]] = None,
    ) -> None:
        super().__init__(report)
        if registry is None:
            registry = DefinitionRegistry(Definition(ROOT_NAME, DefinitionKind.CLASS))
        self.registry = registry
        self.resolver = resolver
        self.node_source = node_source
        self.telemetry = telemetry
        self.loaded_files: set[str] = loaded_files if loaded_files is not None else set()
        self.scanned: set[str] = scanned if scanned is not None else set()
        self.associations = AssociationMap()
        self.operands = AssociationMap()
        self._depths: dict[int, int] = {}
        self._header_nodes: set[int] = set()
        self._branches: list[dict[int, tuple[Definition, Optional[Definition]]]] = []

    def handlers(self) -> dict[str, HandlerPair]:
        table: dict[str, HandlerPair] = {
            "class": (self.on_class, self.after_scope),
            "module": (self.on_module, self.after_scope),
            "method": (self.on_method, self.after_scope),
            "block": (self.on_block, self.after_block),
            "argument": (self.on_argument, self.after_argument),
            "assign": (None, self.after_assign),
            "identifier": (self.on_identifier, None),
            "constant": (self.on_constant, None),
            "self": (self.on_self, None),
            "send": (None, self.after_send),
            "body": (None, self.after_body),
        }
        for kind in READ_KINDS:
            table[kind] = (self.on_variable, None)
        for kind in LITERAL_TYPES:
            table[kind] = (self.on_literal, None)
        for kind in BRANCH_KINDS:
            table[kind] = (self.on_branch, self.after_branch)
        return table

    # Public queries

    def associate(self, node: Node, definition: Definition) -> Definition:
        self.associations[node] = definition
        return definition

    def definition_for(self, node: Optional[Node]) -> Optional[Definition]:
        """The definition associated with ``node``, None when it was never visited."""
        return self.associations.get(node)

    # Scopes

    def on_class(self, node: Node) -> None:
        self._depths[id(node)] = self.registry.depth

        superclass = None
        if isinstance(node.receiver, Node) and node.receiver.type == "constant":
            superclass = self.resolve_constant(node.receiver.name or "")
            self._header_nodes.add(id(node.receiver))
            self.associate(node.receiver, superclass)

        definition = self._define_namespace(DefinitionKind.CLASS, node)

        parent = dereference(superclass)
        if parent is not None and parent.kind == DefinitionKind.CLASS:
            definition.inherits(parent)
        elif node.receiver is not None:
            # Written but unresolved: the real ancestry is unknown.
            definition.inherits(UNKNOWN)
        elif definition.superclass is None:
            default = self.registry.root.member(DefinitionKind.CLASS, ROOT_NAME)
            if default is not None:
                definition.inherits(default)

        self.registry.enter_scope(definition)

    def on_module(self, node: Node) -> None:
        self._depths[id(node)] = self.registry.depth
        self.registry.enter_scope(self._define_namespace(DefinitionKind.MODULE, node))

    def on_method(self, node: Node) -> None:
        self._depths[id(node)] = self.registry.depth

        owner = self.registry.self_definition()
        kind = DefinitionKind.METHOD if node.receiver is not None else DefinitionKind.INSTANCE_METHOD
        name = node.name or ""
        redefined = owner.member(kind, name) is not None

        definition = owner.define(kind, name, node=node, line=node.line, column=node.column)
        if redefined:
            # A new body starts without the previous body's locals.
            for key in [key for key in definition.members if definition.members[key].is_variable()]:
                del definition.members[key]

        self.registry.enter_scope(definition)

    def on_block(self, node: Node) -> None:
        self._depths[id(node)] = self.registry.depth
        self.on_branch(node)
        block = Definition("block", DefinitionKind.BLOCK, parent=self.registry.current, node=node, line=node.line)
        self.registry.enter_scope(block)

    def after_block(self, node: Node) -> None:
        self.after_scope(node)
        self.after_branch(node)

    def after_scope(self, node: Node) -> None:
        self.registry.restore(self._depths.pop(id(node), self.registry.depth))

    def on_argument(self, node: Node) -> None:
        name = (node.name or "").lstrip(ARGUMENT_PREFIXES)
        if not name:
            return
        argument = self.registry.current.define(
            DefinitionKind.ARGUMENT, name, node=node, line=node.line, column=node.column
        )
        self.associate(node, argument)

    def after_argument(self, node: Node) -> None:
        argument = self.associations.get(node)
        if argument is None or not isinstance(node.value, Node):
            return
        default = dereference(self.associations.get(node.value))
        argument.value = default if default is not None and not default.is_unknown() else None

    # Assignments and reads

    def after_assign(self, node: Node) -> None:
        name = node.name
        if not name:
            return

        value = self._value_of(node.value)
        variable = self._assignment_target(kind_for_name(name), name, node)

        if self._branches:
            self._branches[-1].setdefault(id(variable), (variable, variable.value))

        variable.value = value
        self.associate(node, variable.snapshot())

    def on_identifier(self, node: Node) -> None:
        variable = self.registry.lookup_local(node.name or "")
        if variable.is_unknown():
            # Receiverless call or an undefined name; return values are not modeled.
            self.associate(node, UNKNOWN)
            return

        if variable.node is not None:
            variable.node.used = True
        node.type = "local_variable"
        self.associate(node, variable.snapshot())

    def on_variable(self, node: Node) -> None:
        kind = READ_KINDS.get(node.type or "")
        found = self.registry.lookup(node.name or "", kind_hint=kind)
        if found.is_unknown():
            self.associate(node, UNKNOWN)
            return
        if kind == DefinitionKind.LOCAL_VARIABLE and found.node is not None:
            found.node.used = True
        self.associate(node, found.snapshot())

    def on_constant(self, node: Node) -> None:
        if id(node) in self._header_nodes:
            return
        self.associate(node, self.resolve_constant(node.name or ""))

    def on_self(self, node: Node) -> None:
        owner = self.registry.self_definition()
        if self._method_frame_kind() == DefinitionKind.INSTANCE_METHOD:
            self.associate(node, Definition(owner.name, DefinitionKind.INSTANCE, instance_of=owner, node=node))
        else:
            self.associate(node, owner)

    def on_literal(self, node: Node) -> None:
        class_name = LITERAL_TYPES.get(node.type or "")
        if class_name is None:
            return
        core_class = self.registry.root.lookup_member(CONSTANT_KINDS, class_name)
        self.associate(
            node,
            Definition(
                class_name,
                DefinitionKind.INSTANCE,
                builtin_type=class_name,
                instance_of=core_class,
                node=node,
                line=node.line,
                column=node.column,
            ),
        )

    # Expressions

    def after_send(self, node: Node) -> None:
        receiver = self.associations.get(node.receiver) if node.receiver is not None else None

        if node.name in COMPARISON_OPERATORS:
            arguments = _arguments_of(node)
            right = self.associations.get(arguments[0]) if arguments else None
            self.operands[node] = (receiver, right)

        target = dereference(receiver)
        if target is None or target.is_unknown():
            self.associate(node, UNKNOWN)
        elif node.name == "new" and target.kind == DefinitionKind.CLASS:
            self.associate(
                node,
                Definition(target.name, DefinitionKind.INSTANCE, instance_of=target, node=node, line=node.line),
            )
        else:
            self.associate(node, UNKNOWN)

    def after_body(self, node: Node) -> None:
        children = node.children()
        if not children:
            return
        last = self.associations.get(children[-1])
        if last is not None:
            self.associate(node, last)

    # Branches

    def on_branch(self, node: Node) -> None:
        self._branches.append({})

    def after_branch(self, node: Node) -> None:
        if not self._branches:
            return
        changes = self._branches.pop()
        for key, (variable, before) in changes.items():
            if variable.value is not before:
                # Either value may be live after the branch.
                variable.value = None
            if self._branches:
                self._branches[-1].setdefault(key, (variable, before))

    # Constant resolution

    def resolve_constant(self, name: str) -> Definition:
        """Lexical lookup, then the resolver's candidate files, then ``UNKNOWN``."""
        if not name:
            return UNKNOWN

        found = self.registry.lookup_constant_path(name)
        if not found.is_unknown() or self.resolver is None:
            return found

        self._load_candidates(name[len(NAMESPACE_SEPARATOR):] if name.startswith(NAMESPACE_SEPARATOR) else name)
        return self.registry.lookup_constant_path(name)

    def _load_candidates(self, name: str) -> None:
        if name in self.scanned or self.resolver is None:
            return
        self.scanned.add(name)

        paths = self.resolver.scan(name)
        if self.node_source is None:
            return
        for path in paths:
            if path in self.loaded_files:
                continue
            self.loaded_files.add(path)
            self._load_file(path)

    def _load_file(self, path: str) -> None:
        if self.node_source is None:
            return
        try:
            nodes = self.node_source.load_nodes(path)
        except (OSError, ValueError) as error:
            self._warn(f"Could not load definitions from {path}: {error}")
            return

        if self.telemetry is not None:
            self.telemetry.step(f"Loading definitions from {path}")

        iterator = TreeIterator(self.report)
        iterator.bind(
            AssociationTracker,
            registry=self.registry,
            resolver=self.resolver,
            node_source=self.node_source,
            telemetry=self.telemetry,
            loaded_files=self.loaded_files,
            scanned=self.scanned,
        )

        frames = self.registry.frames
        self.registry.frames = [self.registry.root]
        try:
            iterator.iterate(nodes)
        finally:
            self.registry.frames = frames

        for fault in iterator.faults:
            self._warn(f"{path}:{fault.line}: {fault.listener} failed on {fault.event}: {fault.error}")

    # Helpers

    def _define_namespace(self, kind: DefinitionKind, node: Node) -> Definition:
        owner, name = self._namespace_owner(node.name or "")
        existing = owner.member(DefinitionKind.CLASS, name) or owner.member(DefinitionKind.MODULE, name)
        if existing is not None:
            kind = existing.kind
        return owner.define(kind, name, node=node, line=node.line, column=node.column)

    def _namespace_owner(self, name: str) -> tuple[Definition, str]:
        """Writable owner for a possibly namespaced constant name, and the last segment."""
        segments = name.split(NAMESPACE_SEPARATOR)
        if len(segments) == 1:
            return self.registry.self_definition(), name

        head, last = segments[:-1], segments[-1]
        if head[0] == "":
            owner = self.registry.root
            for segment in head[1:]:
                found = owner.member(DefinitionKind.CLASS, segment) or owner.member(DefinitionKind.MODULE, segment)
                owner = owner.define(found.kind if found is not None else DefinitionKind.MODULE, segment)
            return owner, last

        owner = self.registry.writable_path(head, create=True)
        return (owner if owner is not None else self.registry.self_definition()), last

    def _assignment_target(self, kind: DefinitionKind, name: str, node: Node) -> Definition:
        position = {"node": node, "line": node.line, "column": node.column}

        if kind == DefinitionKind.LOCAL_VARIABLE:
            existing = self.registry.lookup_local(name)
            if not existing.is_unknown():
                return existing
            return self.registry.current.define(kind, name, **position)

        if kind in (DefinitionKind.INSTANCE_VARIABLE, DefinitionKind.CLASS_VARIABLE):
            return self.registry.self_definition().define(kind, name, **position)

        if kind == DefinitionKind.GLOBAL_VARIABLE:
            return self.registry.root.define(kind, name, **position)

        owner, constant = self._namespace_owner(name)
        return owner.define(DefinitionKind.CONSTANT, constant, **position)

    def _value_of(self, expression: Any) -> Optional[Definition]:
        if not isinstance(expression, Node):
            return None
        value = dereference(self.associations.get(expression))
        if value is None or value.is_unknown():
            return None
        return value

    def _method_frame_kind(self) -> Optional[DefinitionKind]:
        for frame in reversed(self.registry.frames):
            if frame.kind == DefinitionKind.BLOCK:
                continue
            return frame.kind
        return None

    def _warn(self, message: str) -> None:
        if self.telemetry is not None:
            self.telemetry.warning(message)
        else:
            logging.warning(message)


def _arguments_of(node: Node) -> list[Node]:
    """Argument expressions of a send (its value group)."""
    if isinstance(node.value, list):
        return [child for child in node.value if isinstance(child, Node)]
    if isinstance(node.value, Node):
        return [node.value]
    return []
