"""Fluent builder used by the core library definition scripts."""

from typing import Optional, Union

from ruby_semantic_linter.domain.constants import NAMESPACE_SEPARATOR
from ruby_semantic_linter.domain.definitions import CONSTANT_KINDS, Definition, DefinitionKind


class DefinitionBuilder:
    """
    Wraps a Definition and exposes the five ingestion primitives.

    Scripts stay straight-line code::

        klass = root.define_constant("ArgumentError").inherits("StandardError")
        klass.define_method("exception").define_argument("message")
        klass.define_instance_method("to_s")
    """

    def __init__(self, definition: Definition, root: Optional["DefinitionBuilder"] = None) -> None:
        self.definition = definition
        self.root = root if root is not None else self

    def define_constant(self, name: str) -> "DefinitionBuilder":
        """Define (or reopen) the class ``name`` and return a builder for it."""
        return self._child(DefinitionKind.CLASS, name)

    def define_module(self, name: str) -> "DefinitionBuilder":
        """Define (or reopen) the module ``name`` and return a builder for it."""
        return self._child(DefinitionKind.MODULE, name)

    def inherits(self, ref: Union[str, Definition, "DefinitionBuilder"]) -> "DefinitionBuilder":
        """Declare the superclass. Unknown names become placeholder classes on the root."""
        if isinstance(ref, DefinitionBuilder):
            ancestor = ref.definition
        elif isinstance(ref, Definition):
            ancestor = ref
        else:
            ancestor = self.root.resolve(ref)
        self.definition.inherits(ancestor)
        return self

    def define_method(self, name: str) -> "DefinitionBuilder":
        """Define a class level (singleton) method."""
        return self._child(DefinitionKind.METHOD, name)

    def define_instance_method(self, name: str) -> "DefinitionBuilder":
        """Define a method available on instances."""
        return self._child(DefinitionKind.INSTANCE_METHOD, name)

    def define_argument(self, name: str) -> "DefinitionBuilder":
        """Define an argument of the method this builder wraps."""
        self.definition.define(DefinitionKind.ARGUMENT, name)
        return self

    def resolve(self, path: str) -> Definition:
        """Find (or create as a placeholder class) the constant ``path`` below this builder."""
        current = self.definition
        for segment in path.split(NAMESPACE_SEPARATOR):
            found = current.lookup_member(CONSTANT_KINDS, segment)
            current = found if found is not None else current.define(DefinitionKind.CLASS, segment)
        return current

    def _child(self, kind: DefinitionKind, name: str) -> "DefinitionBuilder":
        if kind == DefinitionKind.CLASS:
            existing = self.definition.member(DefinitionKind.MODULE, name)
            if existing is not None:
                return DefinitionBuilder(existing, self.root)
        return DefinitionBuilder(self.definition.define(kind, name), self.root)
