"""
Maintenance commands

    python -m mondo.commands create-tables
    python -m mondo.commands import-translations translations.json
    python -m mondo.commands translate-posts --language en --language fr

``import-translations`` reads a JSON list of objects with ``post_id``,
``language``, ``title``, ``content`` and optional ``excerpt`` and upserts
each one. ``translate-posts`` machine-translates posts that have no row for
the given languages; review the results, machine translation is not perfect.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from mondo.config import settings
from mondo.database import AsyncSessionLocal, Base, engine
from mondo.exceptions import MondoError
from mondo.i18n.locale import normalize_language
from mondo.middleware.logging import setup_structured_logging
from mondo.services import post_service
from mondo.services.machine_translation import LibreTranslateClient, translate_missing_posts
from mondo.utils.identifiers import parse_content_id

logger = logging.getLogger("mondo.commands")


async def create_tables() -> None:
    import mondo.models  # noqa: F401  registers tables on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created (if not existing).")


def load_translations(path: Path) -> list[dict[str, Any]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        # {"es": [...], "fr": [...]} grouped by language
        data = [dict(entry, language=entry.get("language", lang)) for lang, entries in data.items() for entry in entries]
    if not isinstance(data, list):
        raise ValueError("Expected a JSON list of translations or an object keyed by language")
    return data


async def import_translations(path: Path) -> tuple[int, int]:
    """Upsert every translation in ``path``. Returns (written, failed)."""
    written = failed = 0
    async with AsyncSessionLocal() as db:
        for entry in load_translations(path):
            try:
                language = normalize_language(entry.get("language"))
                if language is None:
                    raise ValueError("missing language")
                await post_service.upsert_post_translation(
                    db,
                    parse_content_id(entry["post_id"], "Post"),
                    language,
                    title=entry.get("title"),
                    content=entry.get("content"),
                    excerpt=entry.get("excerpt"),
                )
            except (MondoError, KeyError, TypeError, ValueError) as e:
                failed += 1
                logger.error("Skipped %s translation for post %s: %s", entry.get("language"), entry.get("post_id"), e)
                continue
            written += 1
            logger.info("Added %s translation for post %s", language, entry["post_id"])
    return written, failed


async def translate_posts(languages: list[str], source: str, delay: float) -> int:
    async with AsyncSessionLocal() as db, LibreTranslateClient() as client:
        return await translate_missing_posts(db, client, languages, source=source, delay=delay)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python -m mondo.commands", description="Mondo content maintenance")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("create-tables", help="Create missing tables (development only; use alembic elsewhere)")

    imp = sub.add_parser("import-translations", help="Upsert post translations from a JSON file")
    imp.add_argument("path", type=Path)

    tr = sub.add_parser("translate-posts", help="Machine-translate posts missing a language")
    tr.add_argument("--language", "-l", action="append", dest="languages", help="Target language (repeatable)")
    tr.add_argument("--source", default="auto", help="Source language of the posts (default: auto-detect)")
    tr.add_argument("--delay", type=float, default=1.0, help="Seconds to wait between posts")
    return parser


async def _run(args: argparse.Namespace) -> int:
    try:
        if args.command == "create-tables":
            await create_tables()
        elif args.command == "import-translations":
            written, failed = await import_translations(args.path)
            logger.info("Imported %d translation(s), %d failed", written, failed)
            return 1 if failed else 0
        elif args.command == "translate-posts":
            languages = args.languages or settings.supported_languages
            written = await translate_posts(languages, args.source, args.delay)
            logger.info("Translation pass complete: %d row(s) written", written)
        return 0
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    setup_structured_logging(settings.log_level, json_format=settings.log_json)
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(_run(args))
    except MondoError as e:
        logger.error("%s", e.message)
        return 1


if __name__ == "__main__":
    sys.exit(main())
