"""Registry entries describing declared constructs."""

from enum import Enum
from typing import Any, Iterator, Optional


class DefinitionKind(str, Enum):
    """Kinds of constructs the registry tracks."""

    CLASS = "class"
    MODULE = "module"
    METHOD = "method"
    INSTANCE_METHOD = "instance_method"
    CONSTANT = "constant"
    LOCAL_VARIABLE = "local_variable"
    INSTANCE_VARIABLE = "instance_variable"
    CLASS_VARIABLE = "class_variable"
    GLOBAL_VARIABLE = "global_variable"
    ARGUMENT = "argument"
    INSTANCE = "instance"
    BLOCK = "block"
    UNKNOWN = "unknown"


VARIABLE_KINDS: frozenset[DefinitionKind] = frozenset(
    {
        DefinitionKind.LOCAL_VARIABLE,
        DefinitionKind.INSTANCE_VARIABLE,
        DefinitionKind.CLASS_VARIABLE,
        DefinitionKind.GLOBAL_VARIABLE,
        DefinitionKind.ARGUMENT,
    }
)

CONSTANT_KINDS: tuple[DefinitionKind, ...] = (
    DefinitionKind.CLASS,
    DefinitionKind.MODULE,
    DefinitionKind.CONSTANT,
)

METHOD_KINDS: tuple[DefinitionKind, ...] = (DefinitionKind.METHOD, DefinitionKind.INSTANCE_METHOD)

SCOPE_KINDS: frozenset[DefinitionKind] = frozenset(
    {
        DefinitionKind.CLASS,
        DefinitionKind.MODULE,
        DefinitionKind.METHOD,
        DefinitionKind.INSTANCE_METHOD,
        DefinitionKind.BLOCK,
    }
)

# Attributes that define()/merge() accept.
MERGEABLE_ATTRIBUTES: tuple[str, ...] = (
    "superclass",
    "builtin_type",
    "value",
    "instance_of",
    "node",
    "line",
    "column",
)


class Definition:
    """
    A declared construct: class, module, method, constant, variable, ...

    Child definitions live in ``members`` keyed by ``(kind, name)`` so a name
    is unique per kind within its owner; defining it again merges.
    Frozen definitions (the shared core library) are never mutated: defining
    onto or merging into one replaces it with a writable copy first.
    """

    def __init__(
        self,
        name: str,
        kind: DefinitionKind,
        parent: Optional["Definition"] = None,
        superclass: Optional["Definition"] = None,
        builtin_type: Optional[str] = None,
        value: Optional["Definition"] = None,
        instance_of: Optional["Definition"] = None,
        node: Any = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.name = name
        self.kind = kind
        self.parent = parent
        self.superclass = superclass
        self.builtin_type = builtin_type
        self.value = value
        self.instance_of = instance_of
        self.node = node
        self.line = line
        self.column = column
        self.members: dict[tuple[DefinitionKind, str], Definition] = {}
        self.frozen = False

    # Registry primitives

    def define(self, kind: DefinitionKind, name: str, **attrs: Any) -> "Definition":
        """Create or merge the member ``(kind, name)`` and return it."""
        if self.frozen:
            raise RuntimeError(f"Cannot define {kind.value} {name} on frozen {self.name}")

        key = (kind, name)
        existing = self.members.get(key)

        if existing is None:
            existing = Definition(name, kind, parent=self)
            self.members[key] = existing
        elif existing.frozen:
            existing = existing.thaw(parent=self)
            self.members[key] = existing

        existing.merge(**attrs)
        return existing

    def merge(self, **attrs: Any) -> None:
        """Copy the given non-None attributes onto this definition."""
        for attr, value in attrs.items():
            if attr not in MERGEABLE_ATTRIBUTES:
                raise ValueError(f"Unknown definition attribute: {attr}")
            if value is None:
                continue
            if attr == "superclass" and self.kind != DefinitionKind.CLASS:
                continue
            setattr(self, attr, value)

    def inherits(self, definition: "Definition") -> None:
        """Link an ancestor. Only classes carry a superclass."""
        if self.kind == DefinitionKind.CLASS and definition is not self:
            self.superclass = definition

    def member(self, kind: DefinitionKind, name: str) -> Optional["Definition"]:
        return self.members.get((kind, name))

    def lookup_member(self, kinds: tuple[DefinitionKind, ...], name: str) -> Optional["Definition"]:
        """Find a member of one of ``kinds`` here or along the superclass chain."""
        for owner in self.ancestors():
            for kind in kinds:
                found = owner.members.get((kind, name))
                if found is not None:
                    return found
        return None

    def ancestors(self) -> Iterator["Definition"]:
        """Yield this definition followed by its superclass chain."""
        seen: set[int] = set()
        current: Optional[Definition] = self
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            yield current
            current = current.superclass

    def has_unknown_ancestor(self) -> bool:
        """True when the superclass chain runs into a class that could not be resolved."""
        return any(ancestor.is_unknown() for ancestor in self.ancestors())

    # Copy-on-write support

    def freeze(self) -> "Definition":
        """Freeze this definition and all of its members."""
        pending = [self]
        while pending:
            current = pending.pop()
            if current.frozen:
                continue
            current.frozen = True
            pending.extend(current.members.values())
        return self

    def thaw(self, parent: Optional["Definition"] = None) -> "Definition":
        """Return a writable shallow copy; members are shared until written."""
        copy = Definition(
            self.name,
            self.kind,
            parent=parent if parent is not None else self.parent,
            superclass=self.superclass,
            builtin_type=self.builtin_type,
            value=self.value,
            instance_of=self.instance_of,
            node=self.node,
            line=self.line,
            column=self.column,
        )
        copy.members = dict(self.members)
        return copy

    def snapshot(self) -> "Definition":
        """Frozen copy capturing the current state, e.g. a variable's bound value at a read."""
        copy = self.thaw()
        copy.frozen = True
        return copy

    # Predicates

    def is_unknown(self) -> bool:
        return self.kind == DefinitionKind.UNKNOWN

    def is_variable(self) -> bool:
        return self.kind in VARIABLE_KINDS

    def is_constant(self) -> bool:
        return self.kind in CONSTANT_KINDS

    def is_scope(self) -> bool:
        return self.kind in SCOPE_KINDS

    def is_namespace(self) -> bool:
        return self.kind in (DefinitionKind.CLASS, DefinitionKind.MODULE)

    def qualified_name(self) -> str:
        """Namespaced name, e.g. ``Foo::Bar``; top level members have no prefix."""
        names = []
        current: Optional[Definition] = self
        while current is not None and current.parent is not None:
            names.append(current.name)
            current = current.parent
        return "::".join(reversed(names)) or self.name

    def __repr__(self) -> str:
        return f"Definition({self.kind.value}, {self.name!r})"


UNKNOWN = Definition("unknown", DefinitionKind.UNKNOWN).freeze()
