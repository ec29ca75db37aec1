from typing import TYPE_CHECKING, Any, Optional

from ruby_semantic_linter.domain.config import ConfigurationLoader
from ruby_semantic_linter.infrastructure.config_file_loader import ConfigFileLoader
from ruby_semantic_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from ruby_semantic_linter.infrastructure.gateways.json_tree_gateway import JsonTreeGateway
from ruby_semantic_linter.infrastructure.services.constant_resolver import ConstantResolver
from ruby_semantic_linter.infrastructure.services.stub_authority import StubAuthority
from ruby_semantic_linter.infrastructure.services.telemetry import LoggingTelemetry
from ruby_semantic_linter.interface.reporters import DiagnosticReporter, TerminalReporter

if TYPE_CHECKING:
    from ruby_semantic_linter.domain.definitions import Definition
    from ruby_semantic_linter.domain.protocols import (
        FileSystemProtocol,
        NodeSourceProtocol,
        StubAuthorityProtocol,
        TelemetryPort,
    )


class LinterContainer:
    """Dependency Injection Container for the Ruby semantic linter."""

    def __init__(self, config: Optional[dict[str, object]] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config)

    def _register_defaults(self, config: Optional[dict[str, object]]) -> None:
        """Register default implementations for protocols."""
        if config is None:
            config = ConfigFileLoader.load_config_from_fs()
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config))

        telemetry = LoggingTelemetry()
        self.register_singleton("TelemetryPort", telemetry)

        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        self.register_singleton("JsonTreeGateway", JsonTreeGateway(filesystem))
        self.register_singleton("StubAuthority", StubAuthority(telemetry=telemetry))
        self.register_singleton("TerminalReporter", TerminalReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return self.get("ConfigurationLoader")  # type: ignore[no-any-return]

    def get_telemetry_port(self) -> "TelemetryPort":
        return self.get("TelemetryPort")  # type: ignore[no-any-return]

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return self.get("FileSystemGateway")  # type: ignore[no-any-return]

    def get_node_source(self) -> "NodeSourceProtocol":
        return self.get("JsonTreeGateway")  # type: ignore[no-any-return]

    def get_reporter(self) -> DiagnosticReporter:
        return self.get("TerminalReporter")  # type: ignore[no-any-return]

    def get_stub_authority(self) -> "StubAuthorityProtocol":
        return self.get("StubAuthority")  # type: ignore[no-any-return]

    def get_core_root(self) -> "Definition":
        """The frozen core library root, built on first use and shared afterwards."""
        if "CoreRoot" not in self._singletons:
            authority = self.get_stub_authority()
            self.register_singleton("CoreRoot", authority.build_root())
        return self.get("CoreRoot")  # type: ignore[no-any-return]

    def create_resolver(self, config: ConfigurationLoader) -> ConstantResolver:
        """A resolver over the configured directories (a new one per configuration)."""
        return ConstantResolver(
            directories=config.directories,
            ignore=config.ignore_paths,
            extension=config.extension,
            filesystem=self.get_filesystem_gateway(),
        )
