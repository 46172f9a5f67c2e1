"""Tests for exporting the settings document."""
# Created: 2026-10-19

import pytest
import yaml

from fwconfig.config.settings import ExportSettings
from fwconfig.editor import set_alias
from fwconfig.errors import ExportError, NothingToExportError
from fwconfig.export import ConfigExporter, render_yaml
from fwconfig.importers import parse_config
from fwconfig.models import WatchConfig


class TestRenderYaml:
    """Test YAML serialization."""

    def test_two_space_indent(self, config):
        text = render_yaml(config)
        assert "\n  a1b2c3: Mario\n" in text
        assert "\n  enabled: true\n" in text

    def test_round_trip(self, config):
        assert parse_config(render_yaml(config)) == config

    def test_round_trip_after_import_of_sparse_file(self):
        config = parse_config("aliases:\n  abc: Friend\nrefresh: 60\n")
        again = parse_config(render_yaml(config))

        assert again == config
        assert again.extra == {"refresh": 60}
        assert again.watched is None

    def test_ntfy_block_always_written(self):
        config = parse_config("aliases:\n  abc: Friend\n")
        data = yaml.safe_load(render_yaml(config))
        assert data["ntfy"] == {"enabled": False, "server": "", "topic": "", "sendtest": "off"}

    def test_bare_off_written_back_as_text(self):
        config = parse_config("aliases:\n  abc: A\nntfy:\n  sendtest: off\n")
        data = yaml.safe_load(render_yaml(config))
        assert data["ntfy"]["sendtest"] == "off"

    def test_unicode_kept(self):
        config = set_alias(WatchConfig(), "abc", "ピーチ")
        assert "ピーチ" in render_yaml(config)

    def test_unrepresentable_value(self):
        config = WatchConfig(extra={"bad": object()})
        with pytest.raises(ExportError):
            render_yaml(config)


class TestConfigExporter:
    """Test writing configuration.yaml."""

    def test_refuses_empty_document(self, tmp_path):
        exporter = ConfigExporter(ExportSettings(directory=str(tmp_path)))

        with pytest.raises(NothingToExportError):
            exporter.export(WatchConfig())
        assert list(tmp_path.iterdir()) == []

    def test_refuses_document_without_collections(self, tmp_path):
        exporter = ConfigExporter(ExportSettings(directory=str(tmp_path)))
        config = parse_config("watchedonly: true\n")

        with pytest.raises(NothingToExportError):
            exporter.export(config)

    def test_one_alias_is_enough(self, tmp_path):
        exporter = ConfigExporter(ExportSettings(directory=str(tmp_path)))
        config = set_alias(WatchConfig(), "abc", "Friend")

        path = exporter.export(config)

        assert path == tmp_path / "configuration.yaml"
        assert parse_config(path.read_text(encoding="utf-8")) == config

    def test_output_dir_override(self, tmp_path, config):
        exporter = ConfigExporter(ExportSettings(directory=str(tmp_path / "unused")))
        path = exporter.export(config, tmp_path / "out")

        assert path == tmp_path / "out" / "configuration.yaml"
        assert path.exists()
        assert not (tmp_path / "unused").exists()

    def test_custom_filename_and_indent(self, tmp_path, config):
        exporter = ConfigExporter(ExportSettings(
            directory=str(tmp_path), filename="friends.yaml", indent=4
        ))
        path = exporter.export(config)

        assert path.name == "friends.yaml"
        assert "\n    a1b2c3: Mario\n" in path.read_text(encoding="utf-8")

    def test_write_failure(self, tmp_path, config):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        exporter = ConfigExporter(ExportSettings(directory=str(blocker)))

        with pytest.raises(ExportError):
            exporter.export(config)
