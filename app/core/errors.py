"""
Application errors.

ListenerError is raised at startup when the unix socket path cannot be cleared
or bound, so the entry point can exit with a clear message instead of a traceback.
"""


class ListenerError(OSError):
    """Raised when the stale socket path cannot be removed or the socket cannot be bound."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")
