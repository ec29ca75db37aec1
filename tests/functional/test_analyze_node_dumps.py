"""End to end: node dumps on disk, the real core root, resolver and JSON gateway."""

from pathlib import Path

from typer.testing import CliRunner

from ruby_semantic_linter.domain.definitions import Definition
from ruby_semantic_linter.infrastructure.di.container import LinterContainer
from ruby_semantic_linter.infrastructure.gateways.json_tree_gateway import JsonTreeGateway
from ruby_semantic_linter.infrastructure.services.constant_resolver import ConstantResolver
from ruby_semantic_linter.infrastructure.services.telemetry import LoggingTelemetry
from ruby_semantic_linter.interface.cli import CLIDependencies, create_app
from ruby_semantic_linter.use_cases.analyze_tree import AnalyzeTreeUseCase

SOURCE_DATA = Path(__file__).parent / "source-data"
SHOP_LIB = SOURCE_DATA / "shop" / "lib"


def _use_case(core_root: Definition) -> AnalyzeTreeUseCase:
    return AnalyzeTreeUseCase(
        root=core_root,
        telemetry=LoggingTelemetry(),
        resolver=ConstantResolver(directories=[str(SHOP_LIB)]),
        node_source=JsonTreeGateway(),
    )


def test_order_reports_contradictory_comparisons(core_root: Definition) -> None:
    use_case = _use_case(core_root)
    report = use_case.execute_files([str(SHOP_LIB / "shop" / "order.rb.json")])[0]

    assert [(entry.line, entry.message) for entry in report] == [
        (11, "Comparing Integer with String evaluates to false"),
        (12, "Comparing Symbol with String evaluates to false"),
    ]
    assert report.entries[0].code == '      count == "1"'
    assert use_case.faults == []


def test_constants_from_other_files_are_loaded_on_demand(core_root: Definition) -> None:
    use_case = _use_case(core_root)
    report = use_case.execute_files([str(SHOP_LIB / "shop" / "order.rb.json")])[0]

    # Money defines its own ==, so line 13 stays quiet only if money.rb was loaded.
    assert 13 not in [entry.line for entry in report]


def test_standalone_script(core_root: Definition) -> None:
    report = _use_case(core_root).execute_files([str(SOURCE_DATA / "standalone.rb.json")])[0]
    assert [(entry.line, entry.message) for entry in report] == [
        (2, "Comparing Integer with String evaluates to false"),
    ]


def test_cli_end_to_end() -> None:
    container = LinterContainer(config={"directories": [str(SHOP_LIB)]})
    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        node_source=container.get_node_source(),
        reporter=container.get_reporter(),
        core_root=container.get_core_root,
        resolver_factory=container.create_resolver,
    )

    result = CliRunner().invoke(
        create_app(deps), ["analyze", str(SHOP_LIB / "shop" / "order.rb.json"), str(SOURCE_DATA / "standalone.rb.json")]
    )

    assert result.exit_code == 1
    assert "3 problem(s) in 2 file(s)" in result.stdout


def test_cli_scan() -> None:
    container = LinterContainer(config={})
    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        node_source=container.get_node_source(),
        reporter=container.get_reporter(),
        core_root=container.get_core_root,
        resolver_factory=container.create_resolver,
    )

    result = CliRunner().invoke(create_app(deps), ["scan", "Shop::Money", "-d", str(SHOP_LIB)])

    assert result.exit_code == 0
    assert result.stdout.strip() == str((SHOP_LIB / "shop" / "money.rb").resolve())
