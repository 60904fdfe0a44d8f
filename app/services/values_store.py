"""
Values storage: persist submitted values to randomly named files.

Responsibility: Derive a path under the values directory, write the payload and
report the outcome. Called by the API layer; no HTTP or FastAPI here.
"""

import logging
import re
from contextlib import suppress
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from app.core.config import SUFFIX_LENGTH, VALUES_DIR, VALUES_FILE_MODE
from app.core.random_source import RandomSource, get_random_source

logger = logging.getLogger(__name__)

# JSON allows unpaired \ud800-\udfff escapes; UTF-8 cannot encode them
_LONE_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")


@dataclass(frozen=True)
class Stored:
    """Values were written to `path`."""

    path: str


@dataclass(frozen=True)
class StorageFault:
    """Writing the values file failed; `reason` is the OS error message."""

    reason: str


StoreOutcome = Stored | StorageFault


def encode_values(data: str) -> bytes:
    """UTF-8 bytes of `data`, with unpaired surrogates replaced by U+FFFD."""
    return _LONE_SURROGATE_RE.sub("\ufffd", data).encode("utf-8")


class ValuesStore:
    """Writes values files as <base_dir>/<random suffix>. Files are never tracked or removed."""

    def __init__(
        self,
        base_dir: str | Path,
        random_source: RandomSource,
        suffix_length: int = SUFFIX_LENGTH,
        file_mode: int = VALUES_FILE_MODE,
    ) -> None:
        self.base_dir = Path(base_dir).absolute()
        self.random_source = random_source
        self.suffix_length = suffix_length
        self.file_mode = file_mode

    def new_path(self) -> Path:
        """Path for a new values file. Collisions are not checked."""
        return self.base_dir / self.random_source.generate(self.suffix_length)

    def store(self, data: str) -> StoreOutcome:
        """
        Write `data` (UTF-8) to a new values file, creating or truncating it.
        A partially written file is removed on failure.

        Returns:
            Stored with the absolute path, or StorageFault if the write failed.
        """
        path = self.new_path()
        content = encode_values(data)
        logger.info("[values_store:store] IN  data_len=%d path=%s", len(content), path)
        try:
            path.write_bytes(content)
            path.chmod(self.file_mode)
        except OSError as e:
            logger.error("[values_store:store] write failed path=%s: %s", path, e)
            if path.is_file():
                with suppress(OSError):
                    path.unlink()
            return StorageFault(reason=str(e))
        logger.info("[values_store:store] OUT path=%s", path)
        return Stored(path=str(path))


@lru_cache(maxsize=1)
def get_values_store() -> ValuesStore:
    """Process-wide store under VALUES_DIR, sharing the process-wide random source."""
    return ValuesStore(VALUES_DIR, get_random_source())
