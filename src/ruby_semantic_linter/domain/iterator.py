"""
Depth-first traversal with a two-phase listener protocol.

For every node the iterator calls, per bound listener and in binding order,
the listener's enter handler for the node's event, then walks every child
group, then calls the leave handlers. Leave handlers therefore only run once
all descendants are done.

Listeners declare their handlers explicitly::

    class StringPrinter(Listener):
        def handlers(self):
            return {"string": (self.on_string, None)}

        def on_string(self, node):
            print(node.value)

A kind missing from the table, or a ``None`` slot, is a no-op.
"""

import logging
from typing import Any, Callable, Iterable, Optional

from ruby_semantic_linter.domain.entities import ListenerFault
from ruby_semantic_linter.domain.node import Node

Handler = Callable[[Node], None]
HandlerPair = tuple[Optional[Handler], Optional[Handler]]

ENTER = 0
LEAVE = 1


class Listener:
    """Base listener: holds the shared report, handles nothing."""

    def __init__(self, report: Any = None) -> None:
        self.report = report

    def handlers(self) -> dict[str, HandlerPair]:
        """Map node kinds to ``(enter, leave)`` handlers."""
        return {}


class TreeIterator:
    """Walks node sequences and dispatches to the bound listeners."""

    def __init__(self, report: Any = None) -> None:
        self.report = report
        self.listeners: list[Listener] = []
        self.faults: list[ListenerFault] = []
        self._tables: list[dict[str, HandlerPair]] = []

    def bind(self, listener_class: Callable[..., Listener], **options: Any) -> Listener:
        """Instantiate ``listener_class`` against the shared report and add it."""
        return self.add(listener_class(self.report, **options))

    def add(self, listener: Listener) -> Listener:
        self.listeners.append(listener)
        self._tables.append(dict(listener.handlers()))
        return listener

    def iterate(self, nodes: Iterable[Any]) -> None:
        """Process ``nodes`` and all their descendants. Non-Node entries are skipped."""
        for node in nodes:
            if not isinstance(node, Node):
                continue

            event = node.event

            self._dispatch(node, event, ENTER)

            for group in node.child_nodes():
                self.iterate(group)

            self._dispatch(node, event, LEAVE)

    def _dispatch(self, node: Node, event: Optional[str], phase: int) -> None:
        if event is None:
            return
        for listener, table in zip(self.listeners, self._tables):
            pair = table.get(event)
            if pair is None:
                continue
            handler = pair[phase]
            if handler is None:
                continue
            try:
                handler(node)
            except Exception as error:  # faults are isolated per handler call
                phase_name = "enter" if phase == ENTER else "leave"
                logging.warning(
                    "Listener %s failed on %s %s (line %s): %s",
                    type(listener).__name__,
                    phase_name,
                    event,
                    node.line,
                    error,
                    exc_info=True,
                )
                self.faults.append(
                    ListenerFault(
                        listener=type(listener).__name__,
                        event=event,
                        phase=phase_name,
                        line=node.line,
                        error=repr(error),
                    )
                )
