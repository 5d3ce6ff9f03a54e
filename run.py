# run.py
import argparse
import asyncio
import json
import sys

from loguru import logger

from core.config import get_settings
from core.exceptions import LookupServiceError
from models.lookup_result import LookupResult
from services.lookup.config_loader import get_provider_config, list_available_providers
from services.lookup.translation_service import TranslationService


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up a word and print launcher rows as JSON.")
    parser.add_argument("word", help="Word or phrase to translate")
    parser.add_argument("--key", help="Application key (default: YOUDAO_APP_KEY)")
    parser.add_argument("--secret", help="Application secret (default: YOUDAO_APP_SECRET)")
    parser.add_argument(
        "--provider",
        choices=list_available_providers(),
        help="Provider table from configs/providers.yaml",
    )
    parser.add_argument("--include-basic", action="store_true", help="Also emit the 'basic' section")
    parser.add_argument("--include-web", action="store_true", help="Also emit the 'web' section")
    return parser


def _print_items(results) -> None:
    print(json.dumps({"items": [r.to_dict() for r in results]}, ensure_ascii=False))


async def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)

    overrides = {}
    if args.key:
        overrides["APP_KEY"] = args.key
    if args.secret:
        overrides["APP_SECRET"] = args.secret
    if args.provider:
        overrides["PROVIDER"] = args.provider
    if args.include_basic:
        overrides["INCLUDE_BASIC"] = True
    if args.include_web:
        overrides["INCLUDE_WEB"] = True
    settings = get_settings().model_copy(update=overrides)

    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)

    provider = get_provider_config(settings.PROVIDER)
    service = TranslationService(settings=settings, provider=provider)
    try:
        results = await service.translate(args.word)
    except LookupServiceError as exc:
        logger.error(f"Error during translation: {exc}")
        _print_items([
            LookupResult(
                title=provider.errors.title,
                subtitle=exc.message,
                action_value=provider.errors.action,
            )
        ])
        return 1

    _print_items(results)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
