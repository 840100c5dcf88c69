"""Protocols for package installation collaborators.

The library only requires these interfaces; apps may supply their own fetcher
(mirror, proxy, local file source) and host notification hook.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Protocol
from typing import runtime_checkable

HostNotifier = Callable[[], None]
"""Zero-argument hook run once after a fully successful install (e.g. asset reindex)."""


@runtime_checkable
class PackageFetcherProtocol(Protocol):
    """Protocol for package archive fetchers.

    Example implementations:
    - HttpPackageFetcher: flat-file HTTP registry endpoint (default)
    - A local file source for offline development
    """

    async def download(self, url: str, dest_path: Path) -> None:
        """Download url into dest_path, creating or overwriting the file.

        Returns only once the download finished or failed.

        Raises:
            FetchError: On any transport or HTTP failure
        """
        ...
