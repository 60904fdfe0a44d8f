"""
Unix domain socket listener setup.

Assumes a single instance per socket path: whatever sits at the path is removed
before binding, with no lock against another instance still listening there.
"""

import logging
import os
import shutil
import socket
from pathlib import Path

from app.core.errors import ListenerError

logger = logging.getLogger(__name__)


def remove_stale_socket(path: str) -> bool:
    """Remove anything at `path` (socket, file, directory). Returns True if something was removed."""
    target = Path(path)
    if not target.exists() and not target.is_symlink():
        return False
    try:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
    except OSError as e:
        raise ListenerError(path, f"cannot remove stale socket: {e}") from e
    logger.info("[listener:remove_stale_socket] removed %s", path)
    return True


def bind_unix_socket(path: str) -> socket.socket:
    """Clear `path` and return a listening AF_UNIX stream socket bound there."""
    remove_stale_socket(path)
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.bind(path)
        sock.listen(socket.SOMAXCONN)
    except OSError as e:
        sock.close()
        raise ListenerError(path, f"cannot bind: {e}") from e
    logger.info("[listener:bind_unix_socket] listening on %s (pid=%d)", path, os.getpid())
    return sock
