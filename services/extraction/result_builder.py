# services/extraction/result_builder.py
"""
Accumulates :class:`LookupResult` rows for one lookup session.

Titles are capped in code points so they fit the launcher row: 24 for
Chinese titles, 60 for everything else. Whatever does not fit is shown as
the subtitle instead of the subtitle that was passed in.
"""

from typing import List

from models.lookup_result import LookupResult, LookupSession
from services.extraction.encoding import repair_encoding
from services.extraction.script import is_chinese_script

CJK_TITLE_CAP = 24
DEFAULT_TITLE_CAP = 60


def title_cap(title: str) -> int:
    """Maximum title length for *title*, decided by the title's own script."""
    return CJK_TITLE_CAP if is_chinese_script(title) else DEFAULT_TITLE_CAP


def split_title(title: str, subtitle: str) -> tuple:
    """
    Return ``(title, subtitle)`` with the title cut at its cap.

    Python strings index by code point, so a cut never lands inside a
    character. On overflow the passed *subtitle* is replaced by the rest of
    the title.
    """
    cap = title_cap(title)
    if len(title) > cap:
        return title[:cap], title[cap:]
    return title, subtitle


def add_result(
    session: LookupSession,
    title: str,
    subtitle: str,
    action_value: str = "",
    pronunciation_key: str = "",
    repair_title_encoding: bool = True,
) -> List[LookupResult]:
    """Normalise one row, append it to the session and return all rows so far."""
    detail_link = session.detail_link

    if repair_title_encoding:
        title = repair_encoding(title)

    title, subtitle = split_title(title, subtitle)

    session.results.append(
        LookupResult(
            title=title,
            subtitle=subtitle,
            action_value=action_value,
            pronunciation_key=pronunciation_key,
            detail_link=detail_link,
        )
    )
    return session.results
