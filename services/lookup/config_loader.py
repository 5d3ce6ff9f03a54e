# services/lookup/config_loader.py
"""
Loads the provider tables from ``configs/providers.yaml`` and validates them
with Pydantic models. The file can contain a top-level ``providers`` key or
just the mapping of provider names → config dictionaries.

Public API:
* ``get_provider_config(name)`` – returns a validated ``ProviderConfig`` or
  raises ``ProviderNotFoundError``.
* ``list_available_providers()`` – convenience helper for the CLI.
"""

import yaml
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ErrorTable(BaseModel):
    """Synthetic result shown when the provider answers with an error code."""
    model_config = ConfigDict(frozen=True)

    title: str = "👻 翻译出错啦"
    action: str = "Ooops..."
    fallback: str = "请参考错误码：{code}"
    messages: Dict[str, str] = Field(default_factory=dict)

    def message_for(self, code) -> str:
        """Human-readable cause for *code*, or the generic fallback."""
        code = "" if code is None else str(code)
        return self.messages.get(code) or self.fallback.format(code=code)


class PageRules(BaseModel):
    """Class requirements that locate the interesting parts of a dictionary page."""
    model_config = ConfigDict(frozen=True)

    container_classes: List[str] = Field(
        default_factory=lambda: ["content-wrp", "dict-container", "opened"]
    )
    group_classes: List[str] = Field(default_factory=lambda: ["trans-container"])
    phonetic_classes: List[str] = Field(default_factory=lambda: ["phonetic"])
    link_classes: List[str] = Field(default_factory=lambda: ["clickable"])
    pronounce_prompt: str = "回车可听发音"


class ProviderConfig(BaseModel):
    """Complete configuration for a single translation provider."""
    model_config = ConfigDict(frozen=True)

    quicklook_url: str
    errors: ErrorTable = Field(default_factory=ErrorTable)
    page: PageRules = Field(default_factory=PageRules)


class AllProviders(BaseModel):
    """Top-level container – maps provider name → its config."""
    providers: Dict[str, ProviderConfig]


# ----------------------------------------------------------------------
# Internal helpers & caching
# ----------------------------------------------------------------------
# Two levels up from this file → project root
CONFIG_PATH = (
    Path(__file__).resolve().parents[2] / "configs" / "providers.yaml"
)

_cached_all: AllProviders | None = None


def _load_yaml() -> dict:
    """Read the YAML file and return the inner ``providers`` mapping."""
    with CONFIG_PATH.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
        return raw.get("providers", raw)


def _load_all() -> AllProviders:
    """
    Parse the YAML, validate it against ``AllProviders`` and cache the
    result. A malformed file raises ``ValidationError``.
    """
    global _cached_all
    if _cached_all is None:
        _cached_all = AllProviders(providers=_load_yaml())
    return _cached_all


class ProviderNotFoundError(KeyError):
    """Raised when a requested provider does not exist in providers.yaml."""

    def __init__(self, provider_name: str):
        super().__init__(f"Provider '{provider_name}' not found.")
        self.provider_name = provider_name


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------
def get_provider_config(provider_name: str) -> ProviderConfig:
    """
    Return the validated ``ProviderConfig`` for *provider_name*.

    Raises
    ------
    ProviderNotFoundError
        If the name is not present in the YAML.
    ValidationError
        If the YAML does not conform to the schema.
    """
    all_cfg = _load_all()
    try:
        return all_cfg.providers[provider_name]
    except KeyError as exc:
        raise ProviderNotFoundError(provider_name) from exc


def list_available_providers() -> List[str]:
    return list(_load_all().providers.keys())
