# models/payload.py
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from loguru import logger
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from core.exceptions import PayloadError

SUCCESS_CODE = "0"


class BasicSection(BaseModel):
    """Dictionary-style ``basic`` block: explanations plus phonetics."""

    explains: List[str] = Field(default_factory=list)
    phonetic: Optional[str] = None
    us_phonetic: Optional[str] = Field(default=None, alias="us-phonetic")
    uk_phonetic: Optional[str] = Field(default=None, alias="uk-phonetic")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class WebEntry(BaseModel):
    """One ``web`` phrase: the phrase itself and its translations."""

    key: str
    value: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class WebDict(BaseModel):
    url: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class TranslationPayload(BaseModel):
    """
    The JSON object returned by the translation API.

    Only the fields the dispatcher reads are modelled; anything else the
    provider sends is ignored. The optional ``basic`` and ``web`` sections
    never fail the payload: a malformed one is logged and read as absent.
    """

    error_code: Optional[str] = Field(default=None, alias="errorCode")
    query: Optional[str] = None
    translation: Optional[List[str]] = None
    basic: Optional[BasicSection] = None
    web: Optional[List[WebEntry]] = None
    webdict: Optional[WebDict] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("error_code", mode="before")
    @classmethod
    def _code_as_string(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("basic", "web", mode="wrap")
    @classmethod
    def _optional_section(cls, v: Any, handler: ValidatorFunctionWrapHandler, info) -> Any:
        try:
            return handler(v)
        except ValidationError as exc:
            logger.warning(f"Ignoring malformed '{info.field_name}' section: {exc.error_count()} error(s)")
            return None

    @property
    def is_success(self) -> bool:
        return self.error_code == SUCCESS_CODE

    @property
    def webdict_url(self) -> Optional[str]:
        return self.webdict.url if self.webdict else None


def payload_from_mapping(
    data: Union[Mapping[str, Any], TranslationPayload],
) -> TranslationPayload:
    """
    Build a :class:`TranslationPayload` from decoded JSON.

    Raises
    ------
    PayloadError
        If the mapping does not fit the payload shape (e.g. ``translation``
        is not a list of strings).
    """
    if isinstance(data, TranslationPayload):
        return data
    try:
        return TranslationPayload.model_validate(dict(data))
    except (TypeError, ValueError, ValidationError) as exc:
        raise PayloadError(f"Malformed translation payload: {exc}") from exc
