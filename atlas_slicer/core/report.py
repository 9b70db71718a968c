"""Report builder — text and JSON output for atlas-slicer results."""

import json
import os
from typing import Any

from atlas_slicer.core.types import Report


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'atlas-slicer {report.command}: {report.descriptor_path}'
    if report.image_path:
        header += f' → {os.path.basename(report.image_path)}'
        if report.image_height:
            header += f' ({report.image_width}×{report.image_height})'
    lines.append(header)

    if report.error:
        lines.append(f'Error: {report.error["message"]}')
        return '\n'.join(lines)

    lines.append(f'{len(report.records)} subtextures')
    lines.append('')

    for i, rec in enumerate(report.records):
        src = f'[{rec.x},{rec.y} {rec.width}×{rec.height}]'
        if i < len(report.rects):
            rect = report.rects[i]
            dst = f'  → rect({_num(rect.x)}, {_num(rect.y)}, {_num(rect.width)}, {_num(rect.height)})'
        else:
            dst = ''
        lines.append(f'  {rec.name:<24} {src}{dst}')

    if report.outputs:
        lines.append('')
        if len(report.outputs) == 1:
            lines.append(f'Wrote {report.outputs[0]}')
        else:
            lines.append(f'Wrote {len(report.outputs)} files')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'descriptor': report.descriptor_path,
        'image': report.image_path,
    }
    if report.image_height:
        obj['dimensions'] = {'width': report.image_width, 'height': report.image_height}
    if report.error:
        obj['error'] = report.error
        return json.dumps(obj, indent=2)

    obj['subtextures'] = [
        {'name': r.name, 'x': r.x, 'y': r.y, 'width': r.width, 'height': r.height} for r in report.records
    ]
    if report.rects:
        obj['rects'] = [r.to_dict() for r in report.rects]
    obj['outputs'] = list(report.outputs)
    return json.dumps(obj, indent=2)


def _num(v: float) -> str:
    # 40.0 -> '40', 40.5 -> '40.5'
    return str(int(v)) if float(v).is_integer() else str(v)
