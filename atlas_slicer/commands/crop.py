"""Cut every SubTexture out of the sheet and save it as its own PNG.

Boxes are taken in descriptor (top-left origin) coordinates. Each sprite is
saved as <out_dir>/<name>.png in RGBA; parts of a box outside the sheet stay
transparent.

Output directory: --out, else ATLAS_SLICER_OUT_DIR, else <image stem>_sprites
beside the image.

Example:
    uv run atlas-slicer crop sheet.xml sheet.png
    uv run atlas-slicer crop sheet.xml sheet.png --out ./sprites
"""

import os

from atlas_slicer.core.descriptor import parse_descriptor_file
from atlas_slicer.core.sheet import crop_records, open_sheet
from atlas_slicer.core.types import Command, Report

command = Command(
    name='crop',
    help='Save each SubTexture of the sheet as a separate PNG.',
)


def default_out_dir(image_path: str) -> str:
    stem, _ext = os.path.splitext(image_path)
    return f'{stem}_sprites'


@command.run
def run(args, report: Report) -> None:
    records = parse_descriptor_file(args.descriptor)
    image = open_sheet(args.image)

    report.image_width, report.image_height = image.size
    report.records = records

    out_dir = args.out or getattr(args, 'config_out_dir', None) or default_out_dir(args.image)
    for path in crop_records(image, records, out_dir):
        report.record_output(path)
