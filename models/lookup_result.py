# models/lookup_result.py
from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from services.extraction.script import is_chinese_script


class LookupResult(BaseModel):
    """
    One row shown by the launcher.

    Field aliases are the keys the presentation layer reads
    (``arg`` is copied, ``pronounce`` is spoken, ``quicklookurl`` is opened).
    """

    title: str
    subtitle: str = ""
    action_value: str = Field(default="", alias="arg")
    pronunciation_key: str = Field(default="", alias="pronounce")
    detail_link: str = Field(default="", alias="quicklookurl")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_dict(self) -> Dict[str, str]:
        """Serialise with the presentation-layer key names."""
        return self.model_dump(by_alias=True)


class LookupSession(BaseModel):
    """
    Per-lookup state: the query word, its script classification and the
    results gathered so far. A new session is started for every ``parse``
    call and is never shared between lookups.
    """

    word: str
    is_chinese: bool = False
    quicklook_url: str = ""
    results: List[LookupResult] = Field(default_factory=list)

    @classmethod
    def start(cls, word: str, quicklook_url: str = "") -> "LookupSession":
        return cls(
            word=word,
            is_chinese=is_chinese_script(word),
            quicklook_url=quicklook_url,
        )

    @property
    def detail_link(self) -> str:
        # The dictionary site accepts the raw word in the path.
        return f"{self.quicklook_url}{self.word}"
