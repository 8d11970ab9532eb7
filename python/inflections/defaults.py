"""
Process-wide default ruleset.

Lifecycle: the default ruleset is constructed once on first use, augmented
once from an optional irregular-word document, then treated as read-mostly.
The module-level functions in ``inflections`` all delegate to it.

The document is looked up at $INFLECT_PATH, or inflections.json in the
working directory when the variable is unset. A missing file is normal; an
unreadable or malformed one is logged and ignored so the built-in rules
stay usable.
"""

import logging
import os
import threading
from pathlib import Path
from typing import Optional, Union

from .constants import DEFAULT_INFLECTIONS_FILENAME, INFLECT_PATH_ENV
from .errors import InflectionDecodeError
from .ruleset import Ruleset

logger = logging.getLogger("inflections.defaults")

_default_ruleset: Optional[Ruleset] = None
_default_lock = threading.Lock()


def resolve_inflections_path() -> Path:
    """Path of the optional irregular-word document ($INFLECT_PATH or ./inflections.json)."""
    env_path = os.environ.get(INFLECT_PATH_ENV)
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_INFLECTIONS_FILENAME


def bootstrap(ruleset: Ruleset, path: Optional[Union[str, Path]] = None) -> bool:
    """
    Augment ``ruleset`` from the optional irregular-word document.

    Never raises for a bad document: read and decode failures are logged
    as warnings and the ruleset keeps its current rules.

    Args:
        ruleset: Ruleset to augment
        path: Document path (default: resolve_inflections_path())

    Returns:
        True if a document was loaded
    """
    path = Path(path) if path is not None else resolve_inflections_path()

    if not path.exists():
        logger.debug(f"No inflections file at {path}")
        return False

    try:
        count = ruleset.load_file(path)
    except OSError as e:
        logger.warning(f"Could not read inflections file {path}: {e}")
        return False
    except InflectionDecodeError as e:
        logger.warning(f"Ignoring inflections file {path}: {e}")
        return False

    logger.info(f"Loaded {count} irregular word(s) from {path}")
    return True


def get_default_ruleset() -> Ruleset:
    """Return the process-wide ruleset, building and bootstrapping it on first use."""
    global _default_ruleset

    if _default_ruleset is None:
        with _default_lock:
            if _default_ruleset is None:
                ruleset = Ruleset.default()
                bootstrap(ruleset)
                _default_ruleset = ruleset

    return _default_ruleset


def set_default_ruleset(ruleset: Ruleset) -> None:
    """Replace the process-wide ruleset (no bootstrap is run)."""
    global _default_ruleset
    with _default_lock:
        _default_ruleset = ruleset


def reset_default_ruleset() -> None:
    """Drop the process-wide ruleset; the next access rebuilds it."""
    global _default_ruleset
    with _default_lock:
        _default_ruleset = None
