"""Tests for atlas_slicer.core.importer — importer config JSON sink."""

import json
from pathlib import Path

import pytest
from atlas_slicer.core import importer
from atlas_slicer.core.importer import build_importer_config, default_config_path, write_importer_config
from atlas_slicer.core.types import NamedRect

RECTS = [NamedRect('hero', 10.0, 40.0, 30.0, 40.0), NamedRect('coin', 0.0, 84.0, 16.0, 16.0)]


class TestBuildImporterConfig:
    def test_sprite_multiple_mode(self) -> None:
        config = build_importer_config(RECTS, 'art/sheet.png', 128, 100)
        assert config['textureType'] == 'Sprite'
        assert config['spriteImportMode'] == 'Multiple'

    def test_image_and_dimensions(self) -> None:
        config = build_importer_config(RECTS, 'art/sheet.png', 128, 100)
        assert config['image'] == 'sheet.png'
        assert config['dimensions'] == {'width': 128, 'height': 100}

    def test_spritesheet_in_order(self) -> None:
        config = build_importer_config(RECTS, 'sheet.png', 128, 100)
        assert config['spritesheet'] == [
            {'name': 'hero', 'rect': {'x': 10.0, 'y': 40.0, 'width': 30.0, 'height': 40.0}},
            {'name': 'coin', 'rect': {'x': 0.0, 'y': 84.0, 'width': 16.0, 'height': 16.0}},
        ]


class TestWriteImporterConfig:
    def test_default_path(self) -> None:
        assert default_config_path('art/sheet.png') == 'art/sheet.png.slices.json'

    def test_writes_json(self, tmp_path: Path) -> None:
        out = tmp_path / 'sheet.png.slices.json'
        config = build_importer_config(RECTS, 'sheet.png', 128, 100)
        assert write_importer_config(config, str(out)) == str(out)
        assert json.loads(out.read_text()) == config

    def test_creates_parent_dir(self, tmp_path: Path) -> None:
        out = tmp_path / 'build' / 'slices.json'
        write_importer_config(build_importer_config(RECTS, 'sheet.png', 1, 1), str(out))
        assert out.is_file()

    def test_failed_write_leaves_existing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        out = tmp_path / 'slices.json'
        out.write_text('{"old": true}')

        def boom(*_args, **_kwargs):
            raise OSError('disk full')

        monkeypatch.setattr(importer.json, 'dump', boom)
        with pytest.raises(OSError):
            write_importer_config(build_importer_config(RECTS, 'sheet.png', 1, 1), str(out))
        assert json.loads(out.read_text()) == {'old': True}
        assert [p.name for p in tmp_path.iterdir()] == ['slices.json']
