import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_source(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None
    except OSError as exc:
        raise OSError(f"Can't read {path}: {exc.strerror or exc}") from exc


def update_file(path: str, content: bytes) -> None:
    """Replace the whole content of ``path``, creating parent directories if needed."""
    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(content)
    except OSError as exc:
        raise OSError(f"Can't write {path}: {exc.strerror or exc}") from exc
    logger.info("Updated %s", file_path)
