"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging

from ruby_semantic_linter.infrastructure.di.container import LinterContainer
from ruby_semantic_linter.interface.cli import CLIDependencies, create_app


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    container = LinterContainer()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        node_source=container.get_node_source(),
        reporter=container.get_reporter(),
        core_root=container.get_core_root,
        resolver_factory=container.create_resolver,
    )

    app = create_app(deps)
    app()


if __name__ == "__main__":
    main()
