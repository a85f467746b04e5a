"""Environment utilities for resolving secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, MutableMapping, Optional

logger = logging.getLogger(__name__)

SECRET_FILE_SUFFIX = "_FILE"


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> List[str]:
    """
    Resolve environment variables that follow Docker secret conventions.

    For every KEY_FILE entry, read the referenced file and expose its
    contents via KEY unless KEY is already set. Unreadable files are
    logged and skipped.

    Args:
        environ: Mapping to read from and update. Defaults to ``os.environ``.

    Returns:
        Names of the variables that were populated from a file.
    """
    env = os.environ if environ is None else environ
    resolved: List[str] = []

    for key, file_path in list(env.items()):
        if not key.endswith(SECRET_FILE_SUFFIX):
            continue
        target_key = key[: -len(SECRET_FILE_SUFFIX)]
        if not target_key or env.get(target_key) or not file_path:
            continue
        try:
            env[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            logger.warning(
                "env.secret_file.missing",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
            continue
        except UnicodeDecodeError as exc:
            logger.warning(
                "env.secret_file.decode_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
            continue
        except OSError as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
            continue
        resolved.append(target_key)

    return resolved


# Settings are read at import time, so secrets must be in place first.
load_secret_file_variables()
