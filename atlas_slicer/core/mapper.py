"""Flip descriptor rectangles into bottom-left-origin space.

Descriptor coordinates grow downward from the top-left corner of the sheet;
sprite rects in importer config grow upward from the bottom-left corner.
Only Y changes:

    rect.y = image_height - record.y - record.height

No clamping. A rect hanging off the bottom of the sheet gets a negative Y,
and it is up to whoever consumes the rects to reject it.
"""

from collections.abc import Sequence

from atlas_slicer.core.types import NamedRect, SubTextureRecord


def map_records(records: Sequence[SubTextureRecord], image_height: float) -> list[NamedRect]:
    """Map every record to a NamedRect, preserving order and length."""
    return [map_record(rec, image_height) for rec in records]


def map_record(record: SubTextureRecord, image_height: float) -> NamedRect:
    return NamedRect(
        name=record.name,
        x=float(record.x),
        y=float(image_height - record.y - record.height),
        width=float(record.width),
        height=float(record.height),
    )


def unmap_rect(rect: NamedRect, image_height: float) -> SubTextureRecord:
    """Inverse of map_record. Rect values must be whole numbers."""
    return SubTextureRecord(
        name=rect.name,
        x=int(rect.x),
        y=int(image_height - rect.y - rect.height),
        width=int(rect.width),
        height=int(rect.height),
    )
