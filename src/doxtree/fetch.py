"""Load hierarchy scripts from local files or URLs."""

from __future__ import annotations

import asyncio
from pathlib import Path

from doxtree.exceptions import FetchError, SourceNotFoundError
from doxtree.http_utils import fetch_with_retries
from doxtree.utils.logging_config import get_logger

logger = get_logger(__name__)

_URL_PREFIXES = ("http://", "https://")


def is_url(location: str) -> bool:
    return location.lower().startswith(_URL_PREFIXES)


async def load_hierarchy_source(location: str | Path) -> str:
    """Return the text of a hierarchy script.

    Args:
        location: Local path, or an ``http``/``https`` URL.

    Raises:
        SourceNotFoundError: If the file or URL does not exist.
        FetchError: If reading or fetching fails.
    """
    if isinstance(location, str) and is_url(location):
        logger.debug("Fetching hierarchy", extra={"url": location})
        return await fetch_with_retries(location)

    path = Path(location).expanduser()
    if not path.is_file():
        raise SourceNotFoundError(f"Hierarchy file not found: {path}")
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FetchError(f"Failed to read {path}: {exc}") from exc
