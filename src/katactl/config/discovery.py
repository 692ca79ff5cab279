"""Config file discovery.

Walk-up finder locates katactl.toml, similar to how git finds .git/.
The KATACTL_CONFIG env var overrides the walk-up; the --config CLI flag
bypasses discovery entirely.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "katactl.toml"
CONFIG_ENV_VAR = "KATACTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for katactl.toml.

    Returns the path to the config file, or None if not found.
    Checks KATACTL_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while current != current.parent:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        current = current.parent
    candidate = current / CONFIG_FILENAME
    return candidate if candidate.is_file() else None
