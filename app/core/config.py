"""
Volumes service settings: socket path, values directory, file naming.

Values come from the environment (or a .env file) with fixed defaults;
the --socket flag overrides the socket path at startup.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Unix domain socket the HTTP listener binds (overridden by --socket)
DEFAULT_SOCKET_PATH: str = (
    os.getenv("VOLUMES_SOCKET_PATH", "/run/guest/volumes-service.sock").strip()
    or "/run/guest/volumes-service.sock"
)

# Values files storage: <VALUES_DIR>/<random suffix>
VALUES_DIR: str = os.getenv("VALUES_DIR", "/tmp").strip() or "/tmp"
SUFFIX_LENGTH: int = 10
VALUES_FILE_MODE: int = 0o644

# Letters the random suffix is drawn from (a-z, A-Z)
SUFFIX_ALPHABET: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
