"""Input source handlers (ingesters) for codeqa."""

from pathlib import Path
from typing import Optional

from codeqa.ingesters.folder_ingester import FolderIngester
from codeqa.protocols import Ingester

# Registry of available ingesters
_INGESTERS: list[Ingester] = [
    FolderIngester(),
]


def get_ingester(source: Path | str) -> Optional[Ingester]:
    """Find an ingester that can handle the given source.

    Args:
        source: Path to the input source

    Returns:
        An Ingester instance that can handle the source, or None
    """
    source_path = Path(source)
    for ingester in _INGESTERS:
        if ingester.can_handle(source_path):
            return ingester
    return None


__all__ = ["FolderIngester", "get_ingester"]
