import logging
from typing import AsyncIterator, Dict, Optional, Tuple

import httpx

from tiksave.utils.filename import attachment_disposition
from tiksave.utils.http_headers import media_headers

DOWNLOAD_TIMEOUT = 60.0

logger = logging.getLogger("tiksave")


class UpstreamError(Exception):
    """Origin answered with a non-2xx status before any byte was relayed"""

    def __init__(self, status_code: int):
        super().__init__(f"upstream returned HTTP {status_code}")
        self.status_code = status_code


class DownloadProxy:
    """Relay a remote media file to the caller as an attachment"""

    @staticmethod
    async def open(
        url: str,
        filename: Optional[str],
        client: httpx.AsyncClient,
    ) -> Tuple[AsyncIterator[bytes], Dict[str, str]]:
        """
        Open the upstream stream and build the response headers.
        Returns (generator, headers). Raises UpstreamError or httpx errors
        while nothing has been sent yet.
        """
        req = client.build_request("GET", url, headers=media_headers(), timeout=DOWNLOAD_TIMEOUT)
        upstream = await client.send(req, stream=True)

        if not upstream.is_success:
            await upstream.aclose()
            raise UpstreamError(upstream.status_code)

        headers = {
            "Content-Type": "application/octet-stream",
            "Content-Disposition": attachment_disposition(filename),
            "Cache-Control": "no-cache",
            "X-Content-Type-Options": "nosniff",
        }
        content_length = upstream.headers.get("content-length")
        if content_length and content_length.isdigit():
            headers["Content-Length"] = content_length

        return DownloadProxy.relay(upstream), headers

    @staticmethod
    async def relay(upstream: httpx.Response) -> AsyncIterator[bytes]:
        """
        Yield upstream chunks one at a time. The next read only happens once
        the previous chunk has been handed to the client connection, so a slow
        client pauses the upstream read. Cancellation (client disconnect) or a
        mid-transfer failure closes the upstream response.
        """
        sent = 0
        try:
            async for chunk in upstream.aiter_raw():
                sent += len(chunk)
                yield chunk
        except httpx.HTTPError as e:
            # Headers are already flushed; re-raising makes the server drop the connection
            logger.warning(f"Download interrupted after {sent} bytes: {e}")
            raise
        finally:
            await upstream.aclose()
            logger.debug(f"Upstream closed after {sent} bytes")
