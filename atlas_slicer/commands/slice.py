"""Write importer config that slices the sheet into named sprites.

Reads every SubTexture from the descriptor, flips its rect into
bottom-left-origin space using the sheet height, and writes the result as
JSON importer config (sprite texture, multiple-sprite mode).

Nothing is written unless the descriptor and the image are both valid.
Default output: <image>.slices.json beside the image. Override with --out.

Example:
    uv run atlas-slicer slice sheet.xml sheet.png
    uv run atlas-slicer slice sheet.xml sheet.png --out build/sheet.json --json
"""

from atlas_slicer.core.descriptor import parse_descriptor_file
from atlas_slicer.core.importer import build_importer_config, default_config_path, write_importer_config
from atlas_slicer.core.mapper import map_records
from atlas_slicer.core.sheet import read_sheet_size
from atlas_slicer.core.types import Command, Report

command = Command(
    name='slice',
    help='Map descriptor rects to bottom-left origin and write importer config JSON.',
)


@command.run
def run(args, report: Report) -> None:
    records = parse_descriptor_file(args.descriptor)
    width, height = read_sheet_size(args.image)
    rects = map_records(records, height)

    report.image_width, report.image_height = width, height
    report.records = records
    report.rects = rects

    out = args.out or default_config_path(args.image)
    config = build_importer_config(rects, args.image, width, height)
    report.record_output(write_importer_config(config, out))
