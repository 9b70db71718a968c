"""Print the SubTextures found in a descriptor. Writes nothing.

With an image, each entry also shows its rect flipped to bottom-left origin,
exactly as `slice` would write it.

Example:
    uv run atlas-slicer list sheet.xml
    uv run atlas-slicer list sheet.xml sheet.png --json
"""

from atlas_slicer.core.descriptor import parse_descriptor_file
from atlas_slicer.core.mapper import map_records
from atlas_slicer.core.sheet import read_sheet_size
from atlas_slicer.core.types import Command, Report

command = Command(
    name='list',
    help='Print the SubTextures in a descriptor, with flipped rects if an image is given.',
)


@command.run
def run(args, report: Report) -> None:
    report.records = parse_descriptor_file(args.descriptor)
    if args.image:
        width, height = read_sheet_size(args.image)
        report.image_width, report.image_height = width, height
        report.rects = map_records(report.records, height)
