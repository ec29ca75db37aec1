"""Unit tests for Typer-based CLI interface."""

import json
from pathlib import Path
from unittest.mock import Mock

from typer.testing import CliRunner

from ruby_semantic_linter.domain.config import ConfigurationLoader
from ruby_semantic_linter.domain.definitions import Definition
from ruby_semantic_linter.infrastructure.gateways.json_tree_gateway import JsonTreeGateway
from ruby_semantic_linter.interface.cli import CLIDependencies, create_app
from ruby_semantic_linter.interface.reporters import TerminalReporter

runner = CliRunner()

USELESS = [
    {
        "type": "send",
        "name": "==",
        "line": 1,
        "column": 0,
        "receiver": {"type": "int", "value": "10"},
        "value": [{"type": "str", "value": "10"}],
    }
]

CLEAN = [{"type": "lvasgn", "name": "x", "value": {"type": "int", "value": "1"}, "line": 1, "column": 0}]


def _make_deps(core_root: Definition, **overrides: object) -> CLIDependencies:
    resolver = Mock()
    resolver.scan.return_value = []
    defaults: dict = {
        "config_loader": ConfigurationLoader(),
        "telemetry": Mock(),
        "node_source": JsonTreeGateway(),
        "reporter": TerminalReporter(color=False),
        "core_root": lambda: core_root,
        "resolver_factory": Mock(return_value=resolver),
    }
    defaults.update(overrides)
    return CLIDependencies(**defaults)


def _dump(tmp_path: Path, name: str, records: list) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(records))
    return str(path)


class TestAnalyzeCommand:
    def test_reports_diagnostics_and_exits_one(self, tmp_path: Path, core_root: Definition) -> None:
        dump = _dump(tmp_path, "compare.rb.json", USELESS)
        result = runner.invoke(create_app(_make_deps(core_root)), ["analyze", dump])

        assert result.exit_code == 1
        assert "compare.rb.json:1:0: warning: Comparing Integer with String evaluates to false" in result.stdout
        assert "1 problem(s) in 1 file(s)" in result.stdout

    def test_clean_dump_exits_zero(self, tmp_path: Path, core_root: Definition) -> None:
        dump = _dump(tmp_path, "clean.rb.json", CLEAN)
        result = runner.invoke(create_app(_make_deps(core_root)), ["analyze", dump])

        assert result.exit_code == 0
        assert "No problems in 1 file(s)" in result.stdout

    def test_level_option_filters(self, tmp_path: Path, core_root: Definition) -> None:
        dump = _dump(tmp_path, "compare.rb.json", USELESS)
        result = runner.invoke(create_app(_make_deps(core_root)), ["analyze", dump, "--level", "error"])
        assert result.exit_code == 0

    def test_directory_option_reaches_resolver(self, tmp_path: Path, core_root: Definition) -> None:
        dump = _dump(tmp_path, "clean.rb.json", CLEAN)
        deps = _make_deps(core_root)
        runner.invoke(create_app(deps), ["analyze", dump, "-d", str(tmp_path), "--ignore", "vendor"])

        config = deps.resolver_factory.call_args[0][0]
        assert config.directories == [str(tmp_path.resolve())]
        assert config.ignore_paths == ["vendor"]

    def test_invalid_level_exits_two(self, tmp_path: Path, core_root: Definition) -> None:
        dump = _dump(tmp_path, "clean.rb.json", CLEAN)
        result = runner.invoke(create_app(_make_deps(core_root)), ["analyze", dump, "--level", "fatal"])
        assert result.exit_code == 2

    def test_unknown_check_exits_two(self, tmp_path: Path, core_root: Definition) -> None:
        dump = _dump(tmp_path, "clean.rb.json", CLEAN)
        deps = _make_deps(core_root, config_loader=ConfigurationLoader({"checks": ["missing-check"]}))
        result = runner.invoke(create_app(deps), ["analyze", dump])
        assert result.exit_code == 2

    def test_malformed_dump_exits_two(self, tmp_path: Path, core_root: Definition) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{")
        result = runner.invoke(create_app(_make_deps(core_root)), ["analyze", str(path)])
        assert result.exit_code == 2


class TestScanCommand:
    def test_prints_candidates(self, core_root: Definition) -> None:
        resolver = Mock()
        resolver.scan.return_value = ["/p/lib/foo.rb", "/p/lib/nested/foo.rb"]
        deps = _make_deps(core_root, resolver_factory=Mock(return_value=resolver))

        result = runner.invoke(create_app(deps), ["scan", "Foo"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["/p/lib/foo.rb", "/p/lib/nested/foo.rb"]
        resolver.scan.assert_called_once_with("Foo")

    def test_no_candidates_exits_one(self, core_root: Definition) -> None:
        result = runner.invoke(create_app(_make_deps(core_root)), ["scan", "Ghost"])
        assert result.exit_code == 1
