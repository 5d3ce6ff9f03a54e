# models/translation_request.py
import hashlib
import random
from typing import Optional
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.extraction.script import is_chinese_script


# ----------------------------------------------------------------------
#  Language codes understood by the API
# ----------------------------------------------------------------------
CHINESE = "zh-CHS"
ENGLISH = "en"
AUTO = "auto"


def sign_request(app_key: str, word: str, salt: str, app_secret: str) -> str:
    """MD5 hex digest of ``key + word + salt + secret``."""
    raw = f"{app_key}{word}{salt}{app_secret}"
    return hashlib.md5(raw.encode("utf-8")).hexdigest()


# ----------------------------------------------------------------------
#  Signed request – built once per lookup and rendered as a GET URL
# ----------------------------------------------------------------------
class TranslationRequest(BaseModel):
    """
    Query parameters for one translation API call.

    Use :meth:`for_word` rather than instantiating directly; it picks the
    translation direction from the word's script and signs the request.
    """

    q: str = Field(..., description="Word or phrase to translate")
    from_lang: str = Field(default=AUTO, description="Source language code")
    to_lang: str = Field(default=CHINESE, description="Target language code")
    app_key: str = Field(default="", description="Application key")
    salt: str = Field(..., description="Random nonce mixed into the signature")
    sign: str = Field(..., description="MD5 signature of key+q+salt+secret")

    @field_validator("q")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Query word must not be empty")
        return v

    @classmethod
    def for_word(
        cls,
        word: str,
        app_key: str,
        app_secret: str,
        salt: Optional[str] = None,
    ) -> "TranslationRequest":
        chinese = is_chinese_script(word)
        if salt is None:
            salt = str(random.randint(0, 9999))
        return cls(
            q=word,
            from_lang=CHINESE if chinese else AUTO,
            to_lang=ENGLISH if chinese else CHINESE,
            app_key=app_key,
            salt=salt,
            sign=sign_request(app_key, word, salt, app_secret),
        )

    def to_params(self) -> dict:
        return {
            "q": self.q,
            "from": self.from_lang,
            "to": self.to_lang,
            "appKey": self.app_key,
            "salt": self.salt,
            "sign": self.sign,
        }

    def to_url(self, api_url: str) -> str:
        return f"{api_url}?{urlencode(self.to_params())}"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "q": "test",
                "from_lang": "auto",
                "to_lang": "zh-CHS",
                "app_key": "your-app-key",
                "salt": "1234",
                "sign": "0f1e2d3c4b5a69788796a5b4c3d2e1f0",
            }
        }
    )
