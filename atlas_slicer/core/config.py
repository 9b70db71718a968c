"""Settings for atlas-slicer, from the environment and .env files.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  ATLAS_SLICER_OUT_DIR    default output directory for `crop`
  ATLAS_SLICER_LOG_LEVEL  log level when no -v flag is given (default WARNING)

Command-line flags override both.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = 'ATLAS_SLICER_'
DEFAULT_LOG_LEVEL = 'WARNING'


@dataclass
class SlicerConfig:
    out_dir: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL
    env_path: Path | None = None  # .env file that was loaded, if any


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around the value are stripped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _level_name(raw: str | None) -> str:
    name = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        return DEFAULT_LOG_LEVEL
    return name


def load_config(env_file: str | None = None) -> SlicerConfig:
    """Load .env (if any) and build a SlicerConfig from ATLAS_SLICER_* vars."""
    env_path = load_env(env_file)
    return SlicerConfig(
        out_dir=os.environ.get(f'{ENV_PREFIX}OUT_DIR') or None,
        log_level=_level_name(os.environ.get(f'{ENV_PREFIX}LOG_LEVEL')),
        env_path=env_path,
    )
