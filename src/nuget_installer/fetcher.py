"""HTTP package fetcher (httpx).

A download is a single awaited streaming GET: the coroutine returns only once
the body is fully written or the request failed. The status code is checked
before the destination file is opened, so HTTP errors never leave a file
behind; a transport failure mid-body may leave a partial one.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import httpx

from .exceptions import FetchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0
CHUNK_SIZE = 64 * 1024


class HttpPackageFetcher:
    """
    Download package archives from a flat-file HTTP endpoint.

    Either pass a ready httpx.AsyncClient (owned by the caller, never closed
    here) or let the fetcher open a short-lived client per download.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize fetcher.

        Args:
            client: Optional caller-owned client (connection reuse, proxies, auth)
            timeout: Per-operation timeout in seconds for clients created here
            transport: Optional transport for clients created here (tests use httpx.MockTransport)
        """
        self.client = client
        self.timeout = timeout
        self.transport = transport

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self.client is not None:
            yield self.client
            return

        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            yield client

    async def download(self, url: str, dest_path: Path) -> None:
        """
        Stream url into dest_path (created or overwritten).

        Args:
            url: Archive URL
            dest_path: Local file to write

        Raises:
            FetchError: Non-success HTTP status (status set) or transport failure
                (DNS, refused connection, timeout; status None)
        """
        logger.info(f"Downloading {url}")
        try:
            async with self._client() as client, client.stream("GET", url) as response:
                if not response.is_success:
                    raise FetchError(
                        f"Download failed: HTTP {response.status_code} {response.reason_phrase} for {url}",
                        status=response.status_code,
                        url=url,
                    )

                dest_path.parent.mkdir(parents=True, exist_ok=True)
                size = 0
                with open(dest_path, "wb") as f:
                    async for chunk in response.aiter_bytes(CHUNK_SIZE):
                        f.write(chunk)
                        size += len(chunk)

        except httpx.HTTPError as e:
            raise FetchError(f"Download failed for {url}: {e}", url=url) from e

        logger.debug(f"Downloaded {size} bytes to {dest_path}")
