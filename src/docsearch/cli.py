"""Command-line entry point.

Run
---
    docsearch                       # ingest the seed pages, then prompt
    docsearch --query "pizza dough recipe"
    docsearch --url https://example.com/a --url https://example.com/b
"""

from __future__ import annotations

import argparse
import logging
import sys

from docsearch.config import Settings
from docsearch.errors import DocSearchError, StoreUnavailableError
from docsearch.ingestion.fetcher import PageFetcher
from docsearch.ingestion.pipeline import IngestionPipeline
from docsearch.ingestion.sources import DEFAULT_PAGES, pages_from_urls
from docsearch.retrieval.retriever import RetrievalService
from docsearch.session import InteractiveSession
from docsearch.store.base import VectorStoreBase
from docsearch.store.schema import SchemaManager, documentation_page_schema

logger = logging.getLogger("docsearch")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsearch",
        description="Ingest documentation pages into Weaviate and search them.",
    )
    parser.add_argument(
        "--query",
        default=None,
        help="Search text; when omitted the user is prompted for it",
    )
    parser.add_argument(
        "--url",
        action="append",
        dest="urls",
        default=None,
        help="Page to ingest (repeatable); replaces the default seed list",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL setting)",
    )
    return parser


def connect_store(cfg: Settings) -> VectorStoreBase:
    """Open the Weaviate store and fail fast if it is not ready."""
    from docsearch.store.weaviate_store import WeaviateVectorStore

    store = WeaviateVectorStore(
        host=cfg.weaviate_host,
        port=cfg.weaviate_port,
        grpc_port=cfg.weaviate_grpc_port,
    )
    if not store.health_check():
        store.close()
        raise StoreUnavailableError(f"Weaviate at {cfg.weaviate_host}:{cfg.weaviate_port} is not ready")
    return store


def run(cfg: Settings, args: argparse.Namespace) -> None:
    pages = pages_from_urls(args.urls) if args.urls else DEFAULT_PAGES
    schema = documentation_page_schema(name=cfg.collection_name, vectorizer=cfg.vectorizer)

    store = connect_store(cfg)
    fetcher = PageFetcher(timeout=cfg.request_timeout)
    try:
        session = InteractiveSession(
            store,
            pages,
            schema_manager=SchemaManager(store, schema),
            pipeline=IngestionPipeline(store, fetcher, collection=schema.name),
            retriever=RetrievalService(store, collection=schema.name, min_certainty=cfg.min_certainty),
        )
        session.run(args.query)
    finally:
        fetcher.close()
        store.close()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = Settings()
        logging.basicConfig(
            level=(args.log_level or cfg.log_level).upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        run(cfg, args)
    except DocSearchError:
        logger.exception("Error in main execution")
        return 1
    except Exception:
        logger.exception("Unexpected error in main execution")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
