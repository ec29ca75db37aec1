from pathlib import Path

from ruby_semantic_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway


class TestFileSystemGateway:
    def test_glob_source_files(self, tmp_path: Path) -> None:
        (tmp_path / "models").mkdir()
        (tmp_path / "models" / "user.rb").write_text("")
        (tmp_path / "README.md").write_text("")
        gateway = FileSystemGateway()

        files = gateway.glob_source_files(str(tmp_path), ".rb")
        assert files == [str((tmp_path / "models" / "user.rb").resolve())]

    def test_glob_single_file(self, tmp_path: Path) -> None:
        source = tmp_path / "app.rb"
        source.write_text("")
        gateway = FileSystemGateway()
        assert gateway.glob_source_files(str(source), ".rb") == [str(source.resolve())]
        assert gateway.glob_source_files(str(source), ".rake") == []

    def test_basic_operations(self, tmp_path: Path) -> None:
        gateway = FileSystemGateway()
        target = gateway.join_path(str(tmp_path), "note.txt")
        Path(target).write_text("hello", encoding="utf-8")

        assert gateway.exists(target)
        assert gateway.read_text(target) == "hello"
        assert gateway.is_directory(str(tmp_path))
        assert not gateway.is_directory(target)
        assert gateway.resolve_path(target) == str(Path(target).resolve())
