"""Filesystem path helpers."""

import logging
import os

logger = logging.getLogger(__name__)


def str_is_file_path(path: str | os.PathLike[str]) -> bool:
    """Probe ``path`` with a single ``stat`` call.

    Returns True both when something exists at ``path`` and when the probe
    reports that nothing does; only a failing probe (permission denied, a
    non-directory used as a directory, an invalid path) returns False. In
    other words this answers "can this path be looked up?", not "does it
    exist?". Use :func:`os.path.exists` for the latter.

    Args:
        path: The path to probe. Symlinks are followed.

    Returns:
        bool: False only when the lookup itself failed.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        logger.debug("Path %s does not exist", path)
        return True
    except (OSError, ValueError) as e:
        # ValueError: embedded NUL byte
        logger.debug("Path %s could not be probed: %s", path, e)
        return False
    return True


__all__ = ["str_is_file_path"]
