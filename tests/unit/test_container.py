from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ruby_semantic_linter.domain.config import ConfigurationLoader
from ruby_semantic_linter.domain.definitions import Definition, DefinitionKind
from ruby_semantic_linter.domain.protocols import StubAuthorityProtocol
from ruby_semantic_linter.infrastructure.di.container import LinterContainer
from ruby_semantic_linter.infrastructure.services.constant_resolver import ConstantResolver
from ruby_semantic_linter.infrastructure.services.telemetry import LoggingTelemetry
from ruby_semantic_linter.interface.reporters import DiagnosticReporter, TerminalReporter


class TestLinterContainer:
    def test_initialization_registers_defaults(self) -> None:
        container = LinterContainer(config={})
        assert isinstance(container.get("TelemetryPort"), LoggingTelemetry)
        assert isinstance(container.get_config_loader(), ConfigurationLoader)
        assert container.get_node_source() is container.get("JsonTreeGateway")

    def test_register_and_get_singleton(self) -> None:
        container = LinterContainer(config={})
        mock_dep = {"foo": "bar"}
        container.register_singleton("MockDep", mock_dep)
        assert container.get("MockDep") is mock_dep

    def test_get_missing_dependency_raises_error(self) -> None:
        container = LinterContainer(config={})
        with pytest.raises(ValueError, match=r"Dependency 'Missing' not registered\."):
            container.get("Missing")

    def test_core_root_is_built_once(self) -> None:
        container = LinterContainer(config={})
        root = container.get_core_root()
        assert root.frozen
        assert container.get_core_root() is root

    def test_create_resolver_uses_configuration(self, tmp_path: Path) -> None:
        container = LinterContainer(config={"directories": [str(tmp_path)], "ignore_paths": ["vendor"]})
        resolver = container.create_resolver(container.get_config_loader())
        assert isinstance(resolver, ConstantResolver)
        assert resolver.directories == (str(tmp_path),)
        assert resolver.ignore == ("vendor",)

    def test_core_root_comes_from_the_registered_stub_authority(self) -> None:
        container = LinterContainer(config={})
        authority = MagicMock()
        authority.build_root.return_value = Definition("Object", DefinitionKind.CLASS).freeze()
        container.register_singleton("StubAuthority", authority)

        assert container.get_stub_authority() is authority
        assert container.get_core_root() is authority.build_root.return_value
        authority.build_root.assert_called_once_with()

    def test_reporter_implements_the_reporter_protocol(self) -> None:
        container = LinterContainer(config={})
        reporter = container.get_reporter()
        assert isinstance(reporter, TerminalReporter)
        assert DiagnosticReporter in type(reporter).__mro__
        assert StubAuthorityProtocol in type(container.get_stub_authority()).__mro__
