"""
Portfolio backend - command line entry point.

    portfolio serve              # run the API with uvicorn
    portfolio token EMAIL        # mint an admin access token
    portfolio seed               # add demo items to the configured storage
"""

from __future__ import annotations

import argparse
import asyncio
import logging

import uvicorn

from portfolio.auth.jwt import create_access_token
from portfolio.config import configure_logging, get_settings
from portfolio.core.errors import ConflictError
from portfolio.core.models import Category, ShowcaseDraft
from portfolio.services.showcase import ShowcaseStore
from portfolio.storage import create_local_storage

logger = logging.getLogger(__name__)


DEMO_ITEMS = [
    ShowcaseDraft(
        title_nl="Stem AI",
        title_en="Voice AI",
        description_nl="Een spraakassistent die klantvragen telefonisch afhandelt.",
        description_en="A voice assistant that handles customer questions over the phone.",
        categories=[Category.VOICE],
        keywords=["voice", "telephony"],
    ),
    ShowcaseDraft(
        title_nl="Slimme Chatbot",
        title_en="Smart Chatbot",
        description_nl="Een chatbot die antwoorden haalt uit de eigen kennisbank.",
        description_en="A chatbot that answers from the company's own knowledge base.",
        categories=[Category.CHAT],
        keywords=["chat", "rag"],
    ),
]


async def seed(store: ShowcaseStore, created_by: str) -> int:
    """Create the demo items, skipping ones whose slugs already exist."""
    created = 0
    for draft in DEMO_ITEMS:
        try:
            item = await store.create(draft, created_by=created_by)
        except ConflictError as e:
            logger.info("Skipping demo item: %s", e.message)
            continue
        print(f"  ✓ Created {item.id} ({item.default_slug})")
        created += 1
    return created


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(prog="portfolio", description="Portfolio backend")
    commands = parser.add_subparsers(dest="command", required=True)
    
    serve_cmd = commands.add_parser("serve", help="Run the HTTP API")
    serve_cmd.add_argument("--host", default=None)
    serve_cmd.add_argument("--port", type=int, default=None)
    serve_cmd.add_argument("--reload", action="store_true")
    
    token_cmd = commands.add_parser("token", help="Mint an admin access token")
    token_cmd.add_argument("email")
    token_cmd.add_argument("--name", default="Admin")
    
    seed_cmd = commands.add_parser("seed", help="Add demo items")
    seed_cmd.add_argument("--created-by", default="admin@my-ai.nl")
    
    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings)
    
    if args.command == "serve":
        uvicorn.run(
            "portfolio.api.app:app",
            host=args.host or settings.api_host,
            port=args.port or settings.api_port,
            reload=args.reload,
        )
    elif args.command == "token":
        print(create_access_token(args.email, args.name, settings=settings))
    elif args.command == "seed":
        if settings.storage_backend.lower() == "memory":
            parser.error("seed needs persistent storage; set STORAGE_BACKEND=file")
        store = ShowcaseStore(create_local_storage(settings))
        count = asyncio.run(seed(store, args.created_by))
        print(f"Seeded {count} item(s) into {settings.storage_backend} storage")


if __name__ == "__main__":
    main()
