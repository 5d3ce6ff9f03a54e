# services/lookup/dispatcher.py
import time
from typing import Any, List, Mapping, Union

from loguru import logger
from prometheus_client import Counter, Histogram

from core.exceptions import FetchError
from models.lookup_result import LookupResult, LookupSession
from models.payload import BasicSection, TranslationPayload, WebEntry, payload_from_mapping
from services.extraction.html_tree import parse_document
from services.extraction.page_rules import extract_from_page
from services.extraction.result_builder import add_result
from services.lookup.config_loader import ProviderConfig
from services.lookup.fetcher import PageFetcher

LOOKUP_REQUESTS = Counter('lookup_requests_total', 'Total number of payloads dispatched')
LOOKUP_PROVIDER_ERRORS = Counter(
    'lookup_provider_errors_total',
    'Payloads answered with a provider error code',
    ['code'],
)
WEBDICT_FETCH_FAILURES = Counter(
    'webdict_fetch_failures_total',
    'Dictionary page fetches that produced no rows because of an error',
)
WEBDICT_FETCH_DURATION = Histogram(
    'webdict_fetch_duration_seconds',
    'Time spent fetching and extracting the dictionary page',
)


# ----------------------------------------------------------------------
#  PayloadDispatcher – turns one API payload into launcher rows
# ----------------------------------------------------------------------
class PayloadDispatcher:
    """
    Builds the result list for one lookup.

    The dispatcher itself holds only read-only collaborators; all per-lookup
    state lives in a :class:`LookupSession` created inside :meth:`parse`, so
    one dispatcher can serve any number of concurrent lookups.
    """

    def __init__(
        self,
        provider: ProviderConfig,
        fetcher: PageFetcher,
        include_basic: bool = False,
        include_web: bool = False,
    ):
        self.provider = provider
        self.fetcher = fetcher
        self.include_basic = include_basic
        self.include_web = include_web

    # ------------------------------------------------------------------
    async def parse(
        self,
        payload: Union[Mapping[str, Any], TranslationPayload],
        word: str,
    ) -> List[LookupResult]:
        """
        Return the ordered rows for *payload*, looked up for *word*.

        Payload text arrives correctly decoded, so only rows taken from the
        dictionary page get their titles repaired. Translation, ``basic`` and
        ``web`` rows skip the repair even though :func:`add_result` repairs by
        default; repairing them would turn text such as ``"café"`` or
        ``"cè shì"`` into U+FFFD.

        A provider error code yields exactly one synthetic row. Otherwise the
        direct translation comes first, followed by whatever the linked
        dictionary page contributes; a failing page fetch only loses those
        extra rows.
        """
        LOOKUP_REQUESTS.inc()
        payload = payload_from_mapping(payload)
        session = LookupSession.start(word, self.provider.quicklook_url)
        logger.debug(f"Dispatching payload for '{word}' (chinese={session.is_chinese})")

        if not payload.is_success:
            return self._parse_error(session, payload.error_code)

        self._parse_translation(session, payload.translation)
        if self.include_basic:
            self._parse_basic(session, payload.basic)
        if self.include_web:
            self._parse_web(session, payload.web)
        await self._parse_webdict(session, payload.webdict_url)

        return session.results

    # ------------------------------------------------------------------
    def _parse_error(self, session: LookupSession, code) -> List[LookupResult]:
        errors = self.provider.errors
        message = errors.message_for(code)
        LOOKUP_PROVIDER_ERRORS.labels(code=str(code)).inc()
        logger.warning(f"Provider returned error code {code}: {message}")
        return add_result(
            session,
            errors.title,
            message,
            errors.action,
            "",
            repair_title_encoding=False,
        )

    @staticmethod
    def _parse_translation(session: LookupSession, translation) -> None:
        if not translation:
            return
        text = translation[0]
        pronounce = text if session.is_chinese else session.word
        add_result(session, text, session.word, text, pronounce, repair_title_encoding=False)

    def _parse_basic(self, session: LookupSession, basic: BasicSection | None) -> None:
        if basic is None:
            return

        pronounce = session.word
        for explain in basic.explains:
            pronounce = explain if session.is_chinese else session.word
            add_result(session, explain, session.word, explain, pronounce, repair_title_encoding=False)

        if basic.phonetic:
            add_result(
                session,
                self._format_basic_phonetic(session, basic),
                self.provider.page.pronounce_prompt,
                "~" + pronounce,
                pronounce,
                repair_title_encoding=False,
            )

    @staticmethod
    def _format_basic_phonetic(session: LookupSession, basic: BasicSection) -> str:
        phonetic = ""
        if session.is_chinese and basic.phonetic:
            phonetic = f"[{basic.phonetic}] "
        if basic.us_phonetic:
            phonetic += f" [美: {basic.us_phonetic}] "
        if basic.uk_phonetic:
            phonetic += f" [英: {basic.uk_phonetic}]"
        return phonetic

    @staticmethod
    def _parse_web(session: LookupSession, web: List[WebEntry] | None) -> None:
        for entry in web or []:
            if not entry.value:
                continue
            pronounce = entry.value[0] if session.is_chinese else entry.key
            add_result(
                session,
                ", ".join(entry.value),
                entry.key,
                entry.value[0],
                pronounce,
                repair_title_encoding=False,
            )

    async def _parse_webdict(self, session: LookupSession, url: str | None) -> None:
        if not url:
            return

        start = time.perf_counter()
        try:
            response = await self.fetcher.get(url)
            if not response.ok:
                raise FetchError(
                    f"Dictionary page answered {response.status_code}",
                    url=url,
                    status_code=response.status_code,
                )
            document = parse_document(response.data)
            before = len(session.results)
            extract_from_page(session, document, self.provider.page)
            logger.info(f"Dictionary page added {len(session.results) - before} row(s) for '{session.word}'")
        except Exception as exc:  # pylint: disable=broad-except
            WEBDICT_FETCH_FAILURES.inc()
            logger.error(f"There has been a problem fetching {url}: {exc}")
        finally:
            WEBDICT_FETCH_DURATION.observe(time.perf_counter() - start)
