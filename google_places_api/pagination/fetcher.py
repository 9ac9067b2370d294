"""
Page Fetcher

Executes one GET against a Places endpoint and decodes the body.
Transport and decode failures are raised as separate exception types;
nothing is retried here.
"""

import json
import logging
from typing import Sequence, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..exceptions import DecodeError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


async def send_get(
    client: httpx.AsyncClient,
    url: str,
    params: Sequence[Tuple[str, str]],
    follow_redirects: bool = False,
) -> httpx.Response:
    """
    Send a GET and return the response, mapping failures to TransportError.

    Raises:
        TransportError: On connection errors, timeouts or non-2xx status
    """
    try:
        response = await client.get(url, params=list(params), follow_redirects=follow_redirects)
    except httpx.TimeoutException as e:
        raise TransportError(f"Request timed out: {e}", url=url) from e
    except httpx.HTTPError as e:
        raise TransportError(f"Request failed: {e}", url=url) from e

    if not response.is_success:
        raise TransportError(
            f"API error: {response.status_code} - {response.text[:200]}",
            url=url,
            status_code=response.status_code,
        )
    return response


async def fetch_page(
    client: httpx.AsyncClient,
    url: str,
    params: Sequence[Tuple[str, str]],
    model: Type[ModelT],
) -> ModelT:
    """
    Fetch one JSON response and decode it into ``model``.

    Args:
        client: Shared async HTTP client
        url: Endpoint URL
        params: Ordered query parameters
        model: Pydantic model describing the response shape

    Returns:
        Decoded model instance

    Raises:
        TransportError: If the HTTP call fails
        DecodeError: If the body is not JSON or does not match ``model``
    """
    response = await send_get(client, url, params)

    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Response is not valid JSON: {e}", url=url) from e

    try:
        page = model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(
            f"Response does not match {model.__name__}: {e.error_count()} error(s)",
            url=url,
        ) from e

    logger.debug("Fetched %s from %s", model.__name__, url)
    return page
