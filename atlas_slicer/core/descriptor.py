"""Streaming parser for texture-atlas descriptors.

Reads Starling/Sparrow style XML:

    <TextureAtlas imagePath="sheet.png">
      <SubTexture name="hero" x="10" y="20" width="30" height="40"/>
    </TextureAtlas>

Only SubTexture elements matter; everything else is ignored. The document is
scanned with iterparse and each element is dropped once it closes, so
memory stays bounded by nesting depth, not document size. Records come back in
document order, duplicates included.

Fail-fast: the first bad SubTexture aborts the whole parse, and a document
with no SubTexture at all is an error of its own.
"""

import io
import logging
import re
import xml.etree.ElementTree as ET
from typing import BinaryIO

from atlas_slicer.core.errors import InvalidDocument, MalformedAttribute, NoRecordsFound
from atlas_slicer.core.types import SubTextureRecord

logger = logging.getLogger(__name__)

SUBTEXTURE_TAG = 'SubTexture'
NUMERIC_ATTRIBUTES = ('x', 'y', 'width', 'height')

_INT_RE = re.compile(r'\s*[+-]?[0-9]+\s*')


def parse_descriptor_file(path: str) -> list[SubTextureRecord]:
    """Parse a descriptor from disk."""
    try:
        stream = open(path, 'rb')
    except OSError as e:
        raise InvalidDocument(f'Cannot read descriptor {path}: {e.strerror or e}') from e
    return parse_descriptor(stream)


def parse_descriptor_string(text: str) -> list[SubTextureRecord]:
    """Parse a descriptor held in memory."""
    return parse_descriptor(io.BytesIO(text.encode('utf-8')))


def parse_descriptor(stream: BinaryIO) -> list[SubTextureRecord]:
    """Parse every SubTexture in `stream`.

    Takes ownership of the stream: it is closed on return and on every error.
    """
    records: list[SubTextureRecord] = []
    root = None
    with stream:
        try:
            for event, elem in ET.iterparse(stream, events=('start', 'end')):
                if event == 'start':
                    if root is None:
                        root = elem
                    if _local_name(elem.tag) == SUBTEXTURE_TAG:
                        records.append(_read_record(elem, len(records)))
                else:
                    # finished elements are detached so only open ancestors stay alive
                    elem.clear()
                    root.clear()
        except ET.ParseError as e:
            raise InvalidDocument(f'Descriptor is not well-formed XML: {e}') from e

    if not records:
        raise NoRecordsFound()

    logger.info('Found %d subtextures', len(records))
    for rec in records:
        logger.debug('SubTexture %r at (%d, %d) size %dx%d', rec.name, rec.x, rec.y, rec.width, rec.height)
    return records


def _local_name(tag: str) -> str:
    # '{uri}SubTexture' -> 'SubTexture'
    return tag.rpartition('}')[2]


def _read_record(elem: ET.Element, index: int) -> SubTextureRecord:
    values = {attr: _read_int(elem, attr, index) for attr in NUMERIC_ATTRIBUTES}
    name = elem.get('name')
    if name is None:
        raise MalformedAttribute(index, 'name', None)
    return SubTextureRecord(name=name, **values)


def _read_int(elem: ET.Element, attr: str, index: int) -> int:
    raw = elem.get(attr)
    if raw is None or not _INT_RE.fullmatch(raw):
        raise MalformedAttribute(index, attr, raw)
    try:
        return int(raw)
    except ValueError:
        # digit count over sys.get_int_max_str_digits()
        raise MalformedAttribute(index, attr, raw) from None
