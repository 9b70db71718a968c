"""Shared types for atlas-slicer: SubTextureRecord, NamedRect, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SubTextureRecord:
    """One named rectangle from the descriptor, top-left origin, Y down."""

    name: str
    x: int
    y: int
    width: int
    height: int

    @property
    def box(self) -> tuple[int, int, int, int]:
        """(x1, y1, x2, y2) as PIL's Image.crop expects."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class NamedRect:
    """The same rectangle re-expressed with bottom-left origin, Y up."""

    name: str
    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'rect': {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height},
        }


class Command:
    """A self-registering CLI subcommand.

    `name` becomes the subcommand on the command line and the registry key;
    `help` is the one-line summary used when the module has no docstring.
    The run function receives the parsed argparse namespace (descriptor,
    image, out, json, verbose, config_out_dir) and the Report to fill in.
    It signals failure by raising AtlasError; main() turns that into a
    one-line error and exit status 1.

    Usage in a command module:

        command = Command(name='slice', help='Write importer config')

        @command.run
        def run(args, report):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, args: Any, report: Report) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, report)


@dataclass
class Report:
    """Accumulates what a command did for text/JSON output."""

    command: str = ''
    descriptor_path: str = ''
    image_path: str = ''
    image_width: int = 0
    image_height: int = 0
    records: list[SubTextureRecord] = field(default_factory=list)
    rects: list[NamedRect] = field(default_factory=list)
    outputs: list[str] = field(default_factory=list)
    error: dict[str, str] | None = None

    def record_output(self, path: str) -> None:
        """Note a file the command wrote."""
        self.outputs.append(path)

    def record_error(self, kind: str, message: str) -> None:
        self.error = {'kind': kind, 'message': message}
