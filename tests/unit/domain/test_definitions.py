import pytest

from ruby_semantic_linter.domain.definitions import UNKNOWN, Definition, DefinitionKind


class TestDefinition:
    def test_define_is_idempotent_and_merges(self) -> None:
        owner = Definition("Object", DefinitionKind.CLASS)
        first = owner.define(DefinitionKind.LOCAL_VARIABLE, "x", line=1)
        second = owner.define(DefinitionKind.LOCAL_VARIABLE, "x", column=4)

        assert first is second
        assert second.line == 1
        assert second.column == 4
        assert len(owner.members) == 1

    def test_same_name_different_kinds_coexist(self) -> None:
        owner = Definition("Object", DefinitionKind.CLASS)
        owner.define(DefinitionKind.METHOD, "foo")
        owner.define(DefinitionKind.INSTANCE_METHOD, "foo")
        assert len(owner.members) == 2

    def test_merge_rejects_unknown_attributes(self) -> None:
        definition = Definition("x", DefinitionKind.LOCAL_VARIABLE)
        with pytest.raises(ValueError, match="Unknown definition attribute"):
            definition.merge(visibility="private")

    def test_superclass_only_applies_to_classes(self) -> None:
        parent = Definition("Base", DefinitionKind.CLASS)
        module = Definition("Mixin", DefinitionKind.MODULE)
        module.inherits(parent)
        module.merge(superclass=parent)
        assert module.superclass is None

    def test_lookup_member_walks_superclass_chain(self) -> None:
        base = Definition("Base", DefinitionKind.CLASS)
        inherited = base.define(DefinitionKind.INSTANCE_METHOD, "to_s")
        child = Definition("Child", DefinitionKind.CLASS)
        child.inherits(base)

        assert child.lookup_member((DefinitionKind.INSTANCE_METHOD,), "to_s") is inherited
        assert child.lookup_member((DefinitionKind.METHOD,), "to_s") is None

    def test_ancestors_stop_on_cycles(self) -> None:
        first = Definition("A", DefinitionKind.CLASS)
        second = Definition("B", DefinitionKind.CLASS)
        first.superclass = second
        second.superclass = first
        assert [d.name for d in first.ancestors()] == ["A", "B"]

    def test_unknown_ancestor_is_detected(self) -> None:
        base = Definition("Base", DefinitionKind.CLASS)
        base.inherits(UNKNOWN)
        child = Definition("Child", DefinitionKind.CLASS)
        child.inherits(base)

        assert child.has_unknown_ancestor()
        assert not Definition("Plain", DefinitionKind.CLASS).has_unknown_ancestor()
        assert child.lookup_member((DefinitionKind.INSTANCE_METHOD,), "==") is None

    def test_class_cannot_inherit_itself(self) -> None:
        klass = Definition("A", DefinitionKind.CLASS)
        klass.inherits(klass)
        assert klass.superclass is None


class TestCopyOnWrite:
    def test_freeze_is_recursive(self) -> None:
        root = Definition("Object", DefinitionKind.CLASS)
        klass = root.define(DefinitionKind.CLASS, "String")
        method = klass.define(DefinitionKind.INSTANCE_METHOD, "upcase")
        root.freeze()
        assert root.frozen and klass.frozen and method.frozen

    def test_define_on_frozen_raises(self) -> None:
        root = Definition("Object", DefinitionKind.CLASS).freeze()
        with pytest.raises(RuntimeError, match="frozen"):
            root.define(DefinitionKind.CLASS, "Foo")

    def test_writing_through_a_thawed_copy_leaves_original_untouched(self) -> None:
        root = Definition("Object", DefinitionKind.CLASS)
        original = root.define(DefinitionKind.CLASS, "String")
        root.freeze()

        run_root = root.thaw()
        reopened = run_root.define(DefinitionKind.CLASS, "String")
        reopened.define(DefinitionKind.INSTANCE_METHOD, "shout")

        assert reopened is not original
        assert not reopened.frozen
        assert original.member(DefinitionKind.INSTANCE_METHOD, "shout") is None
        assert root.member(DefinitionKind.CLASS, "String") is original

    def test_snapshot_is_frozen_copy(self) -> None:
        variable = Definition("x", DefinitionKind.LOCAL_VARIABLE)
        value = Definition("Integer", DefinitionKind.INSTANCE, builtin_type="Integer")
        variable.value = value

        snapshot = variable.snapshot()
        variable.value = None

        assert snapshot.frozen
        assert snapshot.value is value


class TestPredicates:
    def test_unknown_sentinel(self) -> None:
        assert UNKNOWN.is_unknown()
        assert UNKNOWN.frozen

    def test_kind_predicates(self) -> None:
        assert Definition("x", DefinitionKind.ARGUMENT).is_variable()
        assert Definition("X", DefinitionKind.CONSTANT).is_constant()
        assert Definition("foo", DefinitionKind.BLOCK).is_scope()
        assert not Definition("foo", DefinitionKind.INSTANCE).is_scope()

    def test_qualified_name(self) -> None:
        root = Definition("Object", DefinitionKind.CLASS)
        outer = root.define(DefinitionKind.MODULE, "Foo")
        inner = outer.define(DefinitionKind.CLASS, "Bar")
        assert inner.qualified_name() == "Foo::Bar"
        assert root.qualified_name() == "Object"
