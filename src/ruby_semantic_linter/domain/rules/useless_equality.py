"""Flags ``==`` comparisons between values whose types can never be equal."""

from typing import Optional

from ruby_semantic_linter.domain.definitions import Definition, DefinitionKind
from ruby_semantic_linter.domain.iterator import HandlerPair
from ruby_semantic_linter.domain.node import Node
from ruby_semantic_linter.domain.rules import AnalysisPass
from ruby_semantic_linter.domain.services.association_tracker import dereference

SKIPPED_TYPES: frozenset[str] = frozenset({"unknown"})


def definition_type(definition: Definition) -> Optional[str]:
    """
    The type name a definition evaluates to.

    Built-in values report their marker, variables and assigned constants the
    type of their value, classes and modules their own name and instances
    the name of their class.
    """
    if definition.builtin_type:
        return definition.builtin_type

    if definition.is_variable() or (definition.kind == DefinitionKind.CONSTANT and definition.value is not None):
        value = dereference(definition)
        return definition_type(value) if value is not None else None

    if definition.is_constant():
        return definition.name

    if definition.kind == DefinitionKind.INSTANCE and definition.instance_of is not None:
        return definition.instance_of.name

    return None


class UselessEqualityCheck(AnalysisPass):
    """Warns when both sides of ``==`` resolve to different known types."""

    name = "useless-equality"

    def handlers(self) -> dict[str, HandlerPair]:
        return {"send": (self.on_send, None)}

    def on_send(self, node: Node) -> None:
        if node.name != "==" or self.tracker is None or self.report is None:
            return

        operands = self.tracker.operands.get(node)
        if operands is None:
            return

        left, right = operands
        if left is None or right is None or left.is_unknown() or right.is_unknown():
            return

        left_type = definition_type(left)
        right_type = definition_type(right)
        if _skip_type(left_type) or _skip_type(right_type) or left_type == right_type:
            return

        if self._may_define_equality(left):
            return

        if self.report.is_reported(node, self.name):
            return

        self.warning(f"Comparing {left_type} with {right_type} evaluates to false", node)
        self.report.mark_reported(node, self.name)

    def _may_define_equality(self, definition: Definition) -> bool:
        """True when the left operand's class has a source-defined ``==`` or unknown ancestry."""
        value = dereference(definition)
        if value is None:
            return False
        owner = value.instance_of if value.kind == DefinitionKind.INSTANCE else value
        if owner is None:
            return False
        if owner.has_unknown_ancestor():
            return True
        method = owner.lookup_member((DefinitionKind.INSTANCE_METHOD,), "==")
        return method is not None and method.node is not None


def _skip_type(name: Optional[str]) -> bool:
    return name is None or name in SKIPPED_TYPES

