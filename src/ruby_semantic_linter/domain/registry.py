"""Definition registry: the scope stack plus define/lookup over it."""

from contextlib import contextmanager
from typing import Any, Iterator, Optional, Union

from ruby_semantic_linter.domain.constants import NAMESPACE_SEPARATOR
from ruby_semantic_linter.domain.definitions import (
    CONSTANT_KINDS,
    UNKNOWN,
    Definition,
    DefinitionKind,
)

LOCAL_KINDS: tuple[DefinitionKind, ...] = (DefinitionKind.LOCAL_VARIABLE, DefinitionKind.ARGUMENT)


def kind_for_name(name: str) -> DefinitionKind:
    """Classify a variable or constant name by its sigil."""
    if name.startswith("$"):
        return DefinitionKind.GLOBAL_VARIABLE
    if name.startswith("@@"):
        return DefinitionKind.CLASS_VARIABLE
    if name.startswith("@"):
        return DefinitionKind.INSTANCE_VARIABLE
    if name[:1].isupper() or NAMESPACE_SEPARATOR in name:
        return DefinitionKind.CONSTANT
    return DefinitionKind.LOCAL_VARIABLE


class DefinitionRegistry:
    """
    Nested symbol tables for one analysis run.

    ``frames`` is the active scope stack, outermost (the root) first. Lookups
    walk it innermost to outermost; a miss is the ``UNKNOWN`` definition,
    never an exception.
    """

    def __init__(self, root: Definition) -> None:
        self.root = root.thaw() if root.frozen else root
        self.frames: list[Definition] = [self.root]

    # Scope stack

    @property
    def current(self) -> Definition:
        return self.frames[-1]

    @property
    def depth(self) -> int:
        return len(self.frames)

    def enter_scope(self, definition: Definition) -> Definition:
        self.frames.append(definition)
        return definition

    def exit_scope(self) -> Definition:
        if len(self.frames) == 1:
            raise IndexError("Cannot exit the root scope")
        return self.frames.pop()

    def restore(self, depth: int) -> None:
        """Pop frames until the stack is ``depth`` frames deep."""
        depth = max(depth, 1)
        while len(self.frames) > depth:
            self.frames.pop()

    @contextmanager
    def scope(self, definition: Definition) -> Iterator[Definition]:
        """Enter ``definition`` for the duration of the block, released on every exit path."""
        depth = self.depth
        self.enter_scope(definition)
        try:
            yield definition
        finally:
            self.restore(depth)

    def self_definition(self) -> Definition:
        """The nearest enclosing class or module, the root at top level."""
        for frame in reversed(self.frames):
            if frame.is_namespace():
                return frame
        return self.root

    # Definitions

    def define(self, kind: DefinitionKind, name: str, **attrs: Any) -> Definition:
        """Upsert ``name`` in the active scope."""
        return self.current.define(kind, name, **attrs)

    def declare_inherits(self, definition: Definition, ref: Union[str, Definition]) -> Definition:
        """
        Link ``definition`` to its ancestor.

        A string reference is resolved from the root; a name that does not
        resolve becomes a placeholder class so later lookups still have a target.
        """
        if isinstance(ref, str):
            ancestor = self.lookup_constant_path(ref, start=self.root)
            if ancestor.is_unknown():
                ancestor = self.root.define(DefinitionKind.CLASS, ref)
        else:
            ancestor = ref
        if not ancestor.is_unknown():
            definition.inherits(ancestor)
        return definition

    def writable_path(self, segments: list[str], create: bool = False) -> Optional[Definition]:
        """
        Resolve a namespace path to writable definitions.

        Frozen entries found along the way are replaced by writable copies in
        their (writable) owners. With ``create`` missing segments become
        placeholder modules in the active scope.
        """
        if not segments:
            return self.current

        current: Optional[Definition] = None
        for frame in reversed(self.frames):
            found = _direct_constant(frame, segments[0])
            if found is not None:
                current = frame.define(found.kind, segments[0])
                break

        if current is None:
            if not create:
                return None
            current = self.current.define(DefinitionKind.MODULE, segments[0])

        for segment in segments[1:]:
            found = _direct_constant(current, segment)
            if found is None:
                if not create:
                    return None
                current = current.define(DefinitionKind.MODULE, segment)
            else:
                current = current.define(found.kind, segment)
        return current

    # Lookups

    def lookup(self, name: str, kind_hint: Optional[DefinitionKind] = None) -> Definition:
        """Resolve ``name`` against the scope stack; ``UNKNOWN`` on a miss."""
        kind = kind_hint or kind_for_name(name)

        if kind in LOCAL_KINDS:
            return self.lookup_local(name)
        if kind in (DefinitionKind.INSTANCE_VARIABLE, DefinitionKind.CLASS_VARIABLE):
            found = self.self_definition().lookup_member((kind,), name)
            return found if found is not None else UNKNOWN
        if kind == DefinitionKind.GLOBAL_VARIABLE:
            found = self.root.member(kind, name)
            return found if found is not None else UNKNOWN
        if kind in (DefinitionKind.METHOD, DefinitionKind.INSTANCE_METHOD):
            return self.lookup_method(name)
        return self.lookup_constant_path(name)

    def lookup_local(self, name: str) -> Definition:
        """Locals are visible in the innermost hard scope and the blocks nested in it."""
        for frame in reversed(self.frames):
            found = _direct_member(frame, LOCAL_KINDS, name)
            if found is not None:
                return found
            if frame.kind != DefinitionKind.BLOCK:
                break
        return UNKNOWN

    def lookup_method(self, name: str) -> Definition:
        """Find a method callable on the current ``self``."""
        for frame in reversed(self.frames):
            if frame.kind == DefinitionKind.BLOCK:
                continue
            if frame.kind == DefinitionKind.INSTANCE_METHOD and frame.parent is not None:
                found = frame.parent.lookup_member((DefinitionKind.INSTANCE_METHOD,), name)
            elif frame.kind == DefinitionKind.METHOD and frame.parent is not None:
                found = frame.parent.lookup_member((DefinitionKind.METHOD,), name)
            elif frame.is_namespace() and frame is not self.root:
                found = frame.lookup_member((DefinitionKind.METHOD,), name)
            else:
                found = None
            if found is not None:
                return found
            break

        found = self.root.lookup_member((DefinitionKind.INSTANCE_METHOD, DefinitionKind.METHOD), name)
        return found if found is not None else UNKNOWN

    def lookup_constant(self, name: str) -> Definition:
        """Lexical constant lookup: innermost frame outwards, each with its ancestors, then the root."""
        for frame in reversed(self.frames):
            found = frame.lookup_member(CONSTANT_KINDS, name)
            if found is not None:
                return found
        return UNKNOWN

    def lookup_constant_path(self, path: str, start: Optional[Definition] = None) -> Definition:
        """Resolve ``A::B::C``: the first segment lexically, the rest as members."""
        segments = path.split(NAMESPACE_SEPARATOR)

        if segments[0] == "":
            start = self.root
            segments = segments[1:]
        if not segments:
            return UNKNOWN

        if start is not None:
            current = start.lookup_member(CONSTANT_KINDS, segments[0])
            current = current if current is not None else UNKNOWN
        else:
            current = self.lookup_constant(segments[0])

        for segment in segments[1:]:
            if current.is_unknown():
                return UNKNOWN
            found = current.lookup_member(CONSTANT_KINDS, segment)
            current = found if found is not None else UNKNOWN
        return current


def _direct_member(
    definition: Definition, kinds: tuple[DefinitionKind, ...], name: str
) -> Optional[Definition]:
    for kind in kinds:
        found = definition.member(kind, name)
        if found is not None:
            return found
    return None


def _direct_constant(definition: Definition, name: str) -> Optional[Definition]:
    return _direct_member(definition, CONSTANT_KINDS, name)
