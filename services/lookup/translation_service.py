# services/lookup/translation_service.py
from typing import List, Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from core.config import Settings, get_settings
from core.exceptions import TranslationRequestError
from models.lookup_result import LookupResult
from models.translation_request import TranslationRequest
from services.lookup.config_loader import ProviderConfig, get_provider_config
from services.lookup.dispatcher import PayloadDispatcher
from services.lookup.fetcher import HttpxPageFetcher, PageFetcher


# ----------------------------------------------------------------------
#  TranslationService – one call per word: sign, request, dispatch
# ----------------------------------------------------------------------
class TranslationService:
    """
    End-to-end lookup: calls the translation API for a word and turns the
    answer (plus the linked dictionary page) into launcher rows.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        provider: Optional[ProviderConfig] = None,
        fetcher: Optional[PageFetcher] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.provider = provider or get_provider_config(self.settings.PROVIDER)
        self._transport = transport
        self.dispatcher = PayloadDispatcher(
            provider=self.provider,
            fetcher=fetcher or HttpxPageFetcher(transport=transport),
            include_basic=self.settings.INCLUDE_BASIC,
            include_web=self.settings.INCLUDE_WEB,
        )

    def build_url(self, word: str) -> str:
        try:
            request = TranslationRequest.for_word(
                word,
                app_key=self.settings.APP_KEY,
                app_secret=self.settings.APP_SECRET,
            )
        except ValidationError as exc:
            raise TranslationRequestError(f"Invalid lookup word {word!r}") from exc
        return request.to_url(self.settings.API_URL)

    async def _request_payload(self, url: str) -> dict:
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.REQUEST_TIMEOUT,
                headers={"User-Agent": self.settings.DEFAULT_USER_AGENT},
                transport=self._transport,
            ) as client:
                resp = await client.get(url)
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as exc:
            raise TranslationRequestError(
                f"Translation API answered {exc.response.status_code}", url=url
            ) from exc
        except httpx.HTTPError as exc:
            raise TranslationRequestError(f"Translation API request failed: {exc}", url=url) from exc
        except ValueError as exc:
            raise TranslationRequestError(f"Translation API returned invalid JSON: {exc}", url=url) from exc

    async def translate(self, word: str) -> List[LookupResult]:
        """Look up *word* and return its rows in display order."""
        logger.info(f"Translating '{word}'")
        url = self.build_url(word)
        payload = await self._request_payload(url)
        if not isinstance(payload, dict):
            raise TranslationRequestError("Translation API returned a non-object JSON body", url=url)
        return await self.dispatcher.parse(payload, word)
