import asyncio
import json
import logging
import sys
from typing import Optional

import httpx

from opsmind.config.settings import Settings, settings
from opsmind.container import configure_container
from opsmind.core.exceptions import IngestError
from opsmind.core.services.ask_service import AskService
from opsmind.core.services.ingest_service import IngestService

logger = logging.getLogger(__name__)

USAGE = """Usage: opsmind <command> [args]
Commands:
  ingest <file>...   chunk, embed and store documents
  ask <question>     answer a question from stored documents
  documents          list stored documents
  check              check that the provider API is reachable"""


def check_provider(config: Settings) -> bool:
    """Check that the OpenAI-compatible API lists the configured model.

    Returns:
        True if model available, False otherwise.
    """
    url = f"{config.llm_base_url.rstrip('/')}/models"
    logger.info(f"Checking provider: {url}")

    try:
        resp = httpx.get(
            url,
            headers={"Authorization": f"Bearer {config.llm_api_key}"},
            timeout=5,
        )
    except httpx.HTTPError as e:
        logger.error(f"Provider not available: {e}")
        return False

    if resp.status_code != 200:
        logger.error(f"Provider returned {resp.status_code}: {resp.text[:200]}")
        return False

    models = [m.get("id", "") for m in resp.json().get("data", [])]
    if not any(config.llm_model in m for m in models):
        logger.error(f"Model {config.llm_model} not found (available: {models})")
        return False

    logger.info(f"Model {config.llm_model} is ready")
    return True


async def cmd_ingest(ingest_service: IngestService, paths: list[str]) -> int:
    """Ingest files, return number of failures."""
    failures = 0
    for path in paths:
        try:
            report = await ingest_service.ingest_file(path)
        except IngestError as e:
            logger.error(f"Skipped {path}: {e}")
            failures += 1
            continue
        print(json.dumps(report.to_dict(), ensure_ascii=False))
    return failures


async def cmd_ask(ask_service: AskService, question: str) -> int:
    response = await ask_service.ask(question)
    if response.is_error:
        logger.error(response.error)
        return 1

    print(response.answer)
    if response.sources:
        print("\nSources:")
        for source in response.sources:
            print(f"  - {source.filename}, page {source.page} (score {source.score:.3f})")
    return 0


def cmd_documents(ingest_service: IngestService) -> int:
    documents = ingest_service.list_documents()
    if not documents:
        print("No documents stored")
    for doc in documents:
        print(
            f"{doc.filename}\t{doc.chunk_count} chunks\t"
            f"{doc.embedded_count} embedded\t{doc.size} bytes\t"
            f"{doc.uploaded_at.isoformat()}"
        )
    return 0


def main(argv: Optional[list[str]] = None, config: Settings = settings) -> int:
    """CLI entry point."""
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=config.log_level.upper(), format="%(message)s")

    if not argv:
        print(USAGE)
        return 1

    command, args = argv[0], argv[1:]

    if command == "check":
        return 0 if check_provider(config) else 1

    container = configure_container(config)

    if command == "ingest":
        if not args:
            print(USAGE)
            return 1
        return 1 if asyncio.run(cmd_ingest(container.resolve(IngestService), args)) else 0

    if command == "ask":
        if not args:
            print(USAGE)
            return 1
        return asyncio.run(cmd_ask(container.resolve(AskService), " ".join(args)))

    if command == "documents":
        return cmd_documents(container.resolve(IngestService))

    print(f"Unknown command: {command}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
