"""Sprite-sheet image access via PIL.

The core mapper only needs the sheet height. The crop command also cuts each
record's box out of the sheet and saves it as its own PNG.
"""

import logging
import os
from collections.abc import Sequence

from PIL import Image, UnidentifiedImageError

from atlas_slicer.core.errors import InvalidSheet, InvalidSpriteBox
from atlas_slicer.core.types import SubTextureRecord

logger = logging.getLogger(__name__)


def open_sheet(path: str) -> Image.Image:
    """Open and fully load the sheet, or raise InvalidSheet."""
    if not os.path.isfile(path):
        raise InvalidSheet(f'Invalid sprite sheet: image not found: {path}')
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidSheet(f'Invalid sprite sheet: {path}: {e}') from e


def read_sheet_size(path: str) -> tuple[int, int]:
    """Return (width, height) of the sheet without decoding pixel data."""
    if not os.path.isfile(path):
        raise InvalidSheet(f'Invalid sprite sheet: image not found: {path}')
    try:
        with Image.open(path) as img:
            size = img.size
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidSheet(f'Invalid sprite sheet: {path}: {e}') from e
    logger.debug('Sheet %s is %dx%d', path, size[0], size[1])
    return size


def sprite_filename(name: str) -> str:
    """Sprite name -> file name. Path separators would escape out_dir."""
    safe = name.replace('/', '_').replace('\\', '_')
    if safe in ('', '.', '..'):
        safe = f'_{safe}'
    return f'{safe}.png'


def sprite_filenames(names: Sequence[str]) -> list[str]:
    """One distinct file name per sprite, in order.

    Repeated names get a counter: hero.png, hero_1.png, hero_2.png.
    Compared case-insensitively so case-folding filesystems keep every file.
    """
    used: set[str] = set()
    result = []
    for name in names:
        stem = sprite_filename(name)[: -len('.png')]
        candidate = stem
        n = 0
        while candidate.lower() in used:
            n += 1
            candidate = f'{stem}_{n}'
        used.add(candidate.lower())
        result.append(f'{candidate}.png')
    return result


def check_boxes(records: Sequence[SubTextureRecord]) -> None:
    """Raise InvalidSpriteBox for the first record with an empty or negative size."""
    for i, rec in enumerate(records):
        if rec.width <= 0 or rec.height <= 0:
            raise InvalidSpriteBox(f'SubTexture #{i} {rec.name!r}: cannot crop a {rec.width}x{rec.height} box')


def crop_records(image: Image.Image, records: Sequence[SubTextureRecord], out_dir: str) -> list[str]:
    """Save each record's box as a PNG in out_dir. Returns the written paths.

    Every box is checked before anything is written. Boxes reaching past the
    sheet edge are padded with transparent pixels.
    """
    check_boxes(records)
    os.makedirs(out_dir, exist_ok=True)
    src = image.convert('RGBA')
    paths = []
    for rec, filename in zip(records, sprite_filenames([r.name for r in records])):
        sprite = Image.new('RGBA', (rec.width, rec.height), (0, 0, 0, 0))
        sprite.paste(src.crop(rec.box))
        path = os.path.join(out_dir, filename)
        sprite.save(path)
        logger.debug('Saved %s', path)
        paths.append(path)
    return paths
