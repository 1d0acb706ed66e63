"""HTTP client for downloading label images."""

from dataclasses import dataclass

import httpx

from calorie_hunter.services.label_scan import ImageClient


@dataclass
class HttpxImageClient(ImageClient):
    """Image download client using httpx."""

    http_client: httpx.AsyncClient

    @classmethod
    def create(cls) -> "HttpxImageClient":
        """Create an image client with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(follow_redirects=True))

    async def download_image(self, url: str) -> bytes:
        """Download image bytes, rejecting non-image responses."""
        response = await self.http_client.get(url, timeout=20)
        response.raise_for_status()
        content_type = response.headers.get("content-type", "")
        if not content_type.startswith("image/"):
            raise RuntimeError(f"Expected an image, got {content_type or 'unknown'}")
        return response.content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
