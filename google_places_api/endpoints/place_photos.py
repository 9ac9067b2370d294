"""
Place Photos

Downloads the image bytes for a photo_reference. The service answers
with a redirect to the image, which is followed.
"""

from typing import List, Optional, Tuple

import httpx

from ..exceptions import PreconditionError
from ..pagination import send_get


class PlacePhotos:
    """Builder for a Place Photo request.

    Requires a photo reference; the service also wants at least one of
    max width / max height (1 to 1600 pixels).
    """

    def __init__(self, api_key: str, client: httpx.AsyncClient, url: str):
        self.api_key = api_key
        self.client = client
        self.url = url
        self.photo_reference: Optional[str] = None
        self.max_width: Optional[int] = None
        self.max_height: Optional[int] = None
        self._photo: bytes = b""
        self.content_type: Optional[str] = None

    def with_photo_reference(self, photo_reference: str):
        self.photo_reference = photo_reference
        return self

    def with_max_width(self, max_width: int):
        self.max_width = max_width
        return self

    def with_max_height(self, max_height: int):
        self.max_height = max_height
        return self

    def build_params(self) -> List[Tuple[str, str]]:
        params = [("key", self.api_key)]
        if self.photo_reference is not None:
            params.append(("photoreference", self.photo_reference))
        if self.max_width is not None:
            params.append(("maxwidth", str(self.max_width)))
        if self.max_height is not None:
            params.append(("maxheight", str(self.max_height)))
        return params

    async def execute(self):
        """
        Download the photo.

        Returns:
            self

        Raises:
            PreconditionError: If no photo reference was set
            TransportError: If the download fails
        """
        if self.photo_reference is None:
            raise PreconditionError("Place photo needs a photo_reference")

        response = await send_get(self.client, self.url, self.build_params(), follow_redirects=True)
        self._photo = response.content
        self.content_type = response.headers.get("content-type")
        return self

    def get_photo(self) -> bytes:
        """Image bytes from the last execute (empty before)."""
        return self._photo
