"""Importer config sink — the JSON an engine's texture importer reads.

Marks the sheet as a sprite texture in multiple-sprite mode and lists every
named rect in bottom-left-origin pixels. Written atomically: the file is
either the complete new slice set or untouched.
"""

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from typing import Any

from atlas_slicer.core.types import NamedRect

logger = logging.getLogger(__name__)

TEXTURE_TYPE = 'Sprite'
SPRITE_IMPORT_MODE = 'Multiple'
CONFIG_SUFFIX = '.slices.json'


def default_config_path(image_path: str) -> str:
    """sheet.png -> sheet.png.slices.json"""
    return image_path + CONFIG_SUFFIX


def build_importer_config(
    rects: Sequence[NamedRect],
    image_path: str,
    image_width: int,
    image_height: int,
) -> dict[str, Any]:
    return {
        'image': os.path.basename(image_path),
        'dimensions': {'width': image_width, 'height': image_height},
        'textureType': TEXTURE_TYPE,
        'spriteImportMode': SPRITE_IMPORT_MODE,
        'spritesheet': [r.to_dict() for r in rects],
    }


def write_importer_config(config: dict[str, Any], path: str) -> str:
    """Write config as JSON to path via a temp file + rename. Returns path."""
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix='.slices-', suffix='.tmp', dir=directory)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=2)
            f.write('\n')
        os.replace(tmp, path)
    except BaseException:
        os.unlink(tmp)
        raise
    logger.info('Applied %d rects to %s', len(config['spritesheet']), path)
    return path
