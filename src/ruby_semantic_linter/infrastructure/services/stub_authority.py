"""
Stub Authority: replays the core library definition scripts into a root.

Every module in ``ruby_semantic_linter.stubs.core`` exposes ``load(root)``,
where ``root`` is a DefinitionBuilder over the top level ``Object``.
Scripts run in module name order; forward references to classes defined
by a later script become placeholders that the later script fills in.
"""

import importlib
import pkgutil
from typing import Optional

from ruby_semantic_linter.domain.builder import DefinitionBuilder
from ruby_semantic_linter.domain.constants import ROOT_NAME
from ruby_semantic_linter.domain.definitions import Definition, DefinitionKind
from ruby_semantic_linter.domain.protocols import StubAuthorityProtocol, TelemetryPort

CORE_STUBS_PACKAGE = "ruby_semantic_linter.stubs.core"


class StubAuthority(StubAuthorityProtocol):
    """Builds the frozen core root once; callers share it by reference."""

    def __init__(self, package: str = CORE_STUBS_PACKAGE, telemetry: Optional[TelemetryPort] = None) -> None:
        self.package = package
        self.telemetry = telemetry

    def module_names(self) -> list[str]:
        """Fully qualified names of the definition scripts, sorted."""
        package = importlib.import_module(self.package)
        return sorted(f"{self.package}.{info.name}" for info in pkgutil.iter_modules(package.__path__))

    def build_root(self) -> Definition:
        root = DefinitionBuilder(Definition(ROOT_NAME, DefinitionKind.CLASS))

        for name in self.module_names():
            module = importlib.import_module(name)
            load = getattr(module, "load", None)
            if not callable(load):
                raise ValueError(f"Definition script '{name}' does not define load(root)")
            load(root)

        if self.telemetry is not None:
            self.telemetry.step(f"Loaded {len(root.definition.members)} core definitions")

        return root.definition.freeze()
