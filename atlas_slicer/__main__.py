"""atlas-slicer — Slice sprite sheets from texture-atlas XML descriptors.

Usage: uv run atlas-slicer <command> <descriptor.xml> <image> [options]

Commands are auto-discovered from atlas_slicer/commands/.
Each command module's docstring is its documentation.
Run `atlas-slicer help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, atlas-slicer looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

Exit status: 0 on success, 1 if the descriptor or image is rejected,
2 on bad command-line usage.
"""

import argparse
import importlib
import logging
import sys

from atlas_slicer import registry
from atlas_slicer.core.config import SlicerConfig, load_config
from atlas_slicer.core.errors import AtlasError
from atlas_slicer.core.report import format_json, format_text
from atlas_slicer.core.types import Report

logger = logging.getLogger('atlas_slicer')

# Commands that can run on the descriptor alone
_IMAGE_OPTIONAL = {'list'}


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'atlas_slicer.commands.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  atlas-slicer slice sheet.xml sheet.png\n'
        '  atlas-slicer slice sheet.xml sheet.png --out sheet.json --json\n'
        '  atlas-slicer crop sheet.xml sheet.png --out ./sprites\n'
        '  atlas-slicer list sheet.xml sheet.png\n'
        '  atlas-slicer help slice\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  ATLAS_SLICER_OUT_DIR   default output directory for crop\n'
        '  ATLAS_SLICER_LOG_LEVEL DEBUG, INFO, WARNING (default), ERROR\n'
    )
    parser = argparse.ArgumentParser(
        prog='atlas-slicer',
        description='Slice sprite sheets from texture-atlas XML descriptors.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help))
        p.add_argument('descriptor', help='Path to texture-atlas XML descriptor')
        if name in _IMAGE_OPTIONAL:
            p.add_argument('image', nargs='?', default=None, help='Path to sprite-sheet image (optional)')
        else:
            p.add_argument('image', help='Path to sprite-sheet image')
        p.add_argument('-o', '--out', help='Output file (slice) or directory (crop)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-v', '--verbose', action='count', default=0, help='-v for INFO, -vv for DEBUG logging')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<8} {_short_doc(name, cmd.help)}')
        print('\nRun: atlas-slicer help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _configure_logging(verbose: int, config: SlicerConfig) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(config.log_level)
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s', stream=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    config = load_config(env_file=args.env_file)

    if not args.command:
        parser.print_help(sys.stderr)
        sys.exit(2)

    if args.command == 'help':
        _print_help(args.topic)
        return

    _configure_logging(args.verbose, config)
    if config.env_path:
        logger.info('loaded %s', config.env_path)
    args.config_out_dir = config.out_dir

    report = Report(
        command=args.command,
        descriptor_path=args.descriptor,
        image_path=args.image or '',
    )
    cmd = registry.get(args.command)
    try:
        cmd.execute(args, report)
    except AtlasError as e:
        logger.debug('%s failed', args.command, exc_info=True)
        report.record_error(e.kind, str(e))
        if args.json:
            print(format_json(report))
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
