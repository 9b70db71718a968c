"""Tests for atlas_slicer.core.sheet — PIL sheet reading and cropping."""

from pathlib import Path

import pytest
from atlas_slicer.core.errors import InvalidSheet, InvalidSpriteBox
from atlas_slicer.core.sheet import crop_records, open_sheet, read_sheet_size, sprite_filename, sprite_filenames
from atlas_slicer.core.types import SubTextureRecord
from PIL import Image


@pytest.fixture
def sheet_png(tmp_path: Path) -> Path:
    """64x32 sheet: left half red, right half blue."""
    img = Image.new('RGB', (64, 32), (255, 0, 0))
    img.paste((0, 0, 255), (32, 0, 64, 32))
    path = tmp_path / 'sheet.png'
    img.save(path)
    return path


class TestReadSheet:
    def test_size(self, sheet_png: Path) -> None:
        assert read_sheet_size(str(sheet_png)) == (64, 32)

    def test_missing_image(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidSheet):
            read_sheet_size(str(tmp_path / 'nope.png'))

    def test_not_an_image(self, tmp_path: Path) -> None:
        bogus = tmp_path / 'sheet.png'
        bogus.write_text('not a png')
        with pytest.raises(InvalidSheet):
            read_sheet_size(str(bogus))

    def test_open_sheet(self, sheet_png: Path) -> None:
        img = open_sheet(str(sheet_png))
        assert img.size == (64, 32)
        assert img.getpixel((40, 10)) == (0, 0, 255)


class TestSpriteFilename:
    def test_plain(self) -> None:
        assert sprite_filename('hero') == 'hero.png'

    def test_separators_replaced(self) -> None:
        assert sprite_filename('chars/hero\\idle') == 'chars_hero_idle.png'

    def test_dot_names(self) -> None:
        assert sprite_filename('..') == '_...png'
        assert sprite_filename('') == '_.png'

    def test_repeated_names_get_counter(self) -> None:
        assert sprite_filenames(['d', 'd', 'e', 'd']) == ['d.png', 'd_1.png', 'e.png', 'd_2.png']

    def test_counter_skips_taken_names(self) -> None:
        assert sprite_filenames(['d', 'd_1', 'd']) == ['d.png', 'd_1.png', 'd_1_1.png']

    def test_case_insensitive(self) -> None:
        assert sprite_filenames(['Hero', 'hero']) == ['Hero.png', 'hero_1.png']


class TestCropRecords:
    def test_writes_one_png_per_record(self, sheet_png: Path, tmp_path: Path) -> None:
        records = [SubTextureRecord('red', 0, 0, 32, 32), SubTextureRecord('blue', 32, 0, 32, 16)]
        out = tmp_path / 'sprites'
        paths = crop_records(open_sheet(str(sheet_png)), records, str(out))
        assert [Path(p).name for p in paths] == ['red.png', 'blue.png']
        blue = Image.open(out / 'blue.png')
        assert blue.size == (32, 16)
        assert blue.mode == 'RGBA'
        assert blue.getpixel((0, 0)) == (0, 0, 255, 255)

    def test_box_past_edge_is_transparent(self, sheet_png: Path, tmp_path: Path) -> None:
        records = [SubTextureRecord('edge', 56, 24, 16, 16)]
        crop_records(open_sheet(str(sheet_png)), records, str(tmp_path))
        sprite = Image.open(tmp_path / 'edge.png')
        assert sprite.size == (16, 16)
        assert sprite.getpixel((0, 0)) == (0, 0, 255, 255)
        assert sprite.getpixel((15, 15))[3] == 0

    def test_duplicate_names_all_saved(self, sheet_png: Path, tmp_path: Path) -> None:
        records = [SubTextureRecord('d', 0, 0, 8, 8), SubTextureRecord('d', 32, 0, 8, 8)]
        out = tmp_path / 'sprites'
        paths = crop_records(open_sheet(str(sheet_png)), records, str(out))
        assert [Path(p).name for p in paths] == ['d.png', 'd_1.png']
        assert Image.open(out / 'd.png').getpixel((0, 0)) == (255, 0, 0, 255)
        assert Image.open(out / 'd_1.png').getpixel((0, 0)) == (0, 0, 255, 255)

    @pytest.mark.parametrize('width, height', [(-5, 8), (0, 8), (8, 0)])
    def test_empty_or_negative_box_writes_nothing(
        self, sheet_png: Path, tmp_path: Path, width: int, height: int
    ) -> None:
        records = [SubTextureRecord('ok', 0, 0, 8, 8), SubTextureRecord('bad', 0, 0, width, height)]
        out = tmp_path / 'sprites'
        with pytest.raises(InvalidSpriteBox):
            crop_records(open_sheet(str(sheet_png)), records, str(out))
        assert not out.exists()
