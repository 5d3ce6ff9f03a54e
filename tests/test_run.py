# tests/test_run.py
import asyncio
import json

import pytest
from loguru import logger

import run
from core.exceptions import TranslationRequestError
from models.lookup_result import LookupResult


@pytest.fixture(autouse=True)
def _drop_cli_log_sink():
    yield
    # run.main() points loguru at the captured stderr of this test.
    logger.remove()


class FakeService:
    last_settings = None

    def __init__(self, settings=None, provider=None):
        FakeService.last_settings = settings

    async def translate(self, word):
        return [LookupResult(title=f"{word}!", subtitle=word, action_value=word)]


class FailingService(FakeService):
    async def translate(self, word):
        raise TranslationRequestError("Translation API answered 500")


def test_prints_items_as_json(monkeypatch, capsys):
    monkeypatch.setattr(run, "TranslationService", FakeService)

    code = asyncio.run(run.main(["测试", "--key", "k", "--secret", "s", "--include-web"]))

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["items"][0]["title"] == "测试!"
    assert out["items"][0]["arg"] == "测试"
    assert FakeService.last_settings.APP_KEY == "k"
    assert FakeService.last_settings.INCLUDE_WEB is True


def test_request_error_is_printed_as_a_row(monkeypatch, capsys):
    monkeypatch.setattr(run, "TranslationService", FailingService)

    code = asyncio.run(run.main(["test"]))

    assert code == 1
    item = json.loads(capsys.readouterr().out)["items"][0]
    assert item["subtitle"] == "Translation API answered 500"
    assert item["arg"] == "Ooops..."
