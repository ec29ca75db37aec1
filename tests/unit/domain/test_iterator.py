from typing import Optional

from ruby_semantic_linter.domain.iterator import HandlerPair, Listener, TreeIterator
from ruby_semantic_linter.domain.node import Node
from ruby_semantic_linter.domain.report import Report


class Recorder(Listener):
    def __init__(self, report: Optional[Report] = None, log: Optional[list[str]] = None, tag: str = "") -> None:
        super().__init__(report)
        self.log = log if log is not None else []
        self.tag = tag

    def handlers(self) -> dict[str, HandlerPair]:
        return {
            "class": (self.on_node, self.after_node),
            "method": (self.on_node, self.after_node),
            "integer": (self.on_node, None),
        }

    def on_node(self, node: Node) -> None:
        self.log.append(f"{self.tag}on_{node.type}:{node.name or node.value}")

    def after_node(self, node: Node) -> None:
        self.log.append(f"{self.tag}after_{node.type}:{node.name or node.value}")


class Exploding(Listener):
    def handlers(self) -> dict[str, HandlerPair]:
        return {"method": (self.on_method, None)}

    def on_method(self, node: Node) -> None:
        raise RuntimeError("boom")


def _tree() -> list[Node]:
    method = Node("method", name="bar", value=[Node("integer", value="1")])
    return [Node("class", name="Foo", value=[method]), "not a node"]  # type: ignore[list-item]


class TestTreeIterator:
    def test_enter_children_leave_order(self) -> None:
        iterator = TreeIterator()
        recorder = iterator.bind(Recorder)
        iterator.iterate(_tree())
        assert recorder.log == [
            "on_class:Foo",
            "on_method:bar",
            "on_integer:1",
            "after_method:bar",
            "after_class:Foo",
        ]

    def test_listeners_run_in_binding_order(self) -> None:
        log: list[str] = []
        iterator = TreeIterator()
        iterator.bind(Recorder, log=log, tag="a:")
        iterator.bind(Recorder, log=log, tag="b:")
        iterator.iterate([Node("integer", value="7")])
        assert log == ["a:on_integer:7", "b:on_integer:7"]

    def test_all_enter_handlers_run_before_any_leave_handler(self) -> None:
        log: list[str] = []
        iterator = TreeIterator()
        iterator.bind(Recorder, log=log, tag="a:")
        iterator.bind(Recorder, log=log, tag="b:")
        iterator.iterate([Node("method", name="bar")])
        assert log == ["a:on_method:bar", "b:on_method:bar", "a:after_method:bar", "b:after_method:bar"]

    def test_single_node_key_is_traversed(self) -> None:
        iterator = TreeIterator()
        recorder = iterator.bind(Recorder)
        node = Node.from_record(
            {
                "type": "aref",
                "value": {"type": "ident", "name": "h"},
                "key": {"type": "int", "value": "3"},
            }
        )
        iterator.iterate([node])
        assert recorder.log == ["on_integer:3"]
        assert iterator.faults == []

    def test_bind_passes_shared_report(self) -> None:
        report = Report()
        iterator = TreeIterator(report)
        listener = iterator.bind(Recorder)
        assert listener.report is report
        assert iterator.listeners == [listener]

    def test_missing_handlers_are_no_ops(self) -> None:
        iterator = TreeIterator()
        recorder = iterator.bind(Recorder)
        iterator.iterate([Node("string", value="x")])
        assert recorder.log == []

    def test_faults_are_isolated(self) -> None:
        iterator = TreeIterator()
        iterator.bind(Exploding)
        recorder = iterator.bind(Recorder)
        iterator.iterate(_tree())

        assert "after_class:Foo" in recorder.log
        assert "on_method:bar" in recorder.log
        assert len(iterator.faults) == 1
        fault = iterator.faults[0]
        assert fault.listener == "Exploding"
        assert fault.event == "method"
        assert fault.phase == "enter"
        assert "boom" in fault.error

    def test_event_is_fixed_when_the_node_is_entered(self) -> None:
        class Reclassifier(Listener):
            def handlers(self) -> dict[str, HandlerPair]:
                return {"identifier": (self.on_identifier, None)}

            def on_identifier(self, node: Node) -> None:
                node.type = "local_variable"

        log: list[str] = []

        class LeaveLogger(Listener):
            def handlers(self) -> dict[str, HandlerPair]:
                return {
                    "identifier": (None, lambda node: log.append("identifier")),
                    "local_variable": (None, lambda node: log.append("local_variable")),
                }

        iterator = TreeIterator()
        iterator.bind(Reclassifier)
        iterator.bind(LeaveLogger)
        node = Node("identifier", name="x")
        iterator.iterate([node])

        assert log == ["identifier"]
        assert node.event == "local_variable"
