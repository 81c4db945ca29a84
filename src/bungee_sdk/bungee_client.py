import asyncio
import json
import logging
from decimal import Decimal
from functools import partial
from typing import Optional

import aiohttp
from pydantic import ValidationError

from . import config
from .bungee_request_entities import QuoteParams
from .bungee_response_entities import ApiResponse
from .errors import BungeeRequestError

logger = logging.getLogger(__file__)

# amounts must never pass through float
_loads = partial(json.loads, parse_float=Decimal)


class BungeeClient:
    """
    Bungee REST client.

    Holds a single aiohttp session so every call reuses the same connection
    pool. The session is created on first use unless one is passed in; an
    injected session is never closed by this client.
    """

    def __init__(self, api_key: Optional[str] = None, session: Optional[aiohttp.ClientSession] = None,
                 url: str = config.BUNGEE_QUOTE_URL):
        self.api_key = api_key if api_key is not None else config.BUNGEE_API_KEY
        self.url = url
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    def copy(self) -> 'BungeeClient':
        clone = BungeeClient(api_key=self.api_key, session=self.session, url=self.url)
        clone._owns_session = False
        return clone

    @property
    def session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self):
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    def _headers(self) -> dict:
        headers = {"accept": "application/json"}
        if self.api_key:
            headers["API-KEY"] = self.api_key
        return headers

    async def __request(self, params: dict) -> dict:
        logger.debug("GET %s params=%s", self.url, params)
        try:
            async with self.session.get(self.url, params=params, headers=self._headers()) as resp:
                # error statuses still carry the envelope, so the body decides
                body = await resp.json(content_type=None, loads=_loads)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise BungeeRequestError(f"Error sending a request to Bungee: {e}") from e
        except ValueError as e:
            raise BungeeRequestError(f"Bungee returned a body that is not JSON: {e}") from e
        if not isinstance(body, dict):
            raise BungeeRequestError(f"Unexpected Bungee response: {body!r}")
        return body

    async def get_quote(self, params: QuoteParams) -> ApiResponse:
        body = await self.__request(params.to_query_params())
        try:
            response: ApiResponse = ApiResponse.from_dict(body)
        except ValidationError as e:
            raise BungeeRequestError(f"Unexpected Bungee response shape: {e!r}") from e
        logger.debug("Bungee quote: success=%s statusCode=%s", response.success, response.status_code)
        return response
