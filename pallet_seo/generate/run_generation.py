#!/usr/bin/env python3
"""
SEO Content Generator

Generates landing page copy for the selected page definitions, one page at a
time in registry order, writes the batch to a snapshot file and (unless
--dry-run) patches each successful page into the store as soon as it passes
validation.

Usage:
    seo-generate                               # all pages, live apply
    seo-generate --dry-run                     # generate + preview, no writes
    seo-generate --type=retailer
    seo-generate --page=amazon-liquidation --output=output/amazon.json

Requires ANTHROPIC_API_KEY. DATABASE_URL is required unless --dry-run; with
--dry-run and DATABASE_URL set, pages are looked up and reported as
WOULD_UPDATE / NOT_FOUND without writing.

DATABASE_URL must be sqlite:///<path> or file:<path>. The PostgreSQL URL used by
the Prisma app is rejected at startup; run against a SQLite copy of the
CategoryPage table.
"""

import argparse
import sys
import time
from typing import Optional

from pallet_seo import config
from pallet_seo.apply.apply_generated import STATUS_FAILED, Applier, summarize
from pallet_seo.apply.store import STORE_URL_HELP, open_page_store
from pallet_seo.errors import FatalConfigError, GenerationError
from pallet_seo.generate.client import MessagesClient
from pallet_seo.generate.llm_generator import ContentGenerator
from pallet_seo.generate.phrases import AvoidPhraseSet
from pallet_seo.pages.models import PAGE_TYPES
from pallet_seo.pages.registry import get_page_definitions
from pallet_seo.snapshot.writer import write_snapshot


class GenerationRun:
    """Drives the generator over a page list, sequentially."""

    def __init__(
        self,
        pages: list,
        generator: ContentGenerator,
        applier: Optional[Applier] = None,
        delay_seconds: float = config.INTER_PAGE_DELAY_SECONDS,
        sleep=time.sleep,
    ):
        self.pages = pages
        self.generator = generator
        self.applier = applier
        self.delay_seconds = delay_seconds
        self.sleep = sleep
        self.generated = []
        self.failures = []
        self.apply_results = []

    def run(self) -> dict:
        self.generator.avoid_phrases.reset()
        total = len(self.pages)

        for i, page in enumerate(self.pages, 1):
            print(f"[{i}/{total}] Processing {page.display_name} ({page.slug})")

            try:
                content = self.generator.generate_page(page)
            except GenerationError as e:
                print(f"  [FAIL] {e}")
                self.failures.append({"slug": page.slug, "error": str(e)})
            else:
                generated = {"slug": page.slug, "displayName": page.display_name}
                generated.update(content)
                self.generated.append(generated)

                if self.applier is not None:
                    result = self.applier.apply_page(generated)
                    print(f"  [{result['status']}] {result['message']}")
                    self.apply_results.append(result)

            if i < total:
                self.sleep(self.delay_seconds)

        return self.summary()

    def summary(self) -> dict:
        return {
            "total_pages": len(self.pages),
            "successful": len(self.generated),
            "failed": len(self.failures),
            "unique_phrases": len(self.generator.avoid_phrases),
            "failures": list(self.failures),
            "apply": summarize(self.apply_results),
        }


# =============================================================================
# CLI
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seo-generate",
        description="Generate SEO content for liquidation landing pages",
        epilog=STORE_URL_HELP,
    )
    parser.add_argument("--dry-run", action="store_true", help="Do not write to the page store")
    parser.add_argument("--page", help="Only generate the page with this slug")
    parser.add_argument("--type", choices=PAGE_TYPES, help="Only generate pages of this type")
    parser.add_argument("--output", help="Snapshot path (default: SEO_OUTPUT_DIR/generated-<epoch-ms>.json)")
    parser.add_argument(
        "--delay",
        type=float,
        default=config.INTER_PAGE_DELAY_SECONDS,
        help="Seconds to wait between pages",
    )
    return parser


def print_summary(summary: dict, output_path, dry_run: bool):
    print()
    print("=" * 70)
    print("GENERATION SUMMARY")
    print("=" * 70)
    print(f"Total pages: {summary['total_pages']}")
    print(f"Successful: {summary['successful']}")
    print(f"Failed: {summary['failed']}")
    for failure in summary["failures"]:
        print(f"  - {failure['slug']}: {failure['error']}")
    print(f"Unique phrases tracked: {summary['unique_phrases']}")
    by_status = summary["apply"]["by_status"]
    if by_status:
        print("Apply outcomes:")
        for status, count in by_status.items():
            print(f"  {status}: {count}")
    print(f"Output file: {output_path}")
    if dry_run:
        print()
        print("DRY_RUN - no database changes made.")
        print("Review the output file, then apply it with: seo-apply --file=<output file>")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    print("=" * 70)
    print("SEO CONTENT GENERATOR")
    print("=" * 70)
    print()

    env_path = config.load_env()
    if env_path:
        print(f"Loaded {env_path}")

    try:
        pages = get_page_definitions(page_type=args.type, slug=args.page)
    except KeyError as e:
        print(f"ERROR: {e.args[0]}")
        return 1

    try:
        client = MessagesClient.from_env()
        database_url = config.get_database_url()
        store = None
        if not args.dry_run or database_url:
            store = open_page_store(database_url)
    except FatalConfigError as e:
        print(f"ERROR: {e}")
        return 1

    print("Configuration:")
    print(f"  Dry run: {args.dry_run}")
    print(f"  Page filter: {args.page or 'all'}")
    print(f"  Type filter: {args.type or 'all'}")
    print(f"  Model: {client.model}")
    print(f"  Preview/apply store: {'yes' if store is not None else 'none'}")
    print()
    print(f"Processing {len(pages)} pages")
    print()

    applier = Applier(store, dry_run=args.dry_run) if store is not None else None
    generator = ContentGenerator(client, AvoidPhraseSet())
    run = GenerationRun(pages, generator, applier=applier, delay_seconds=args.delay)

    interrupted = False
    try:
        run.run()
    except KeyboardInterrupt:
        interrupted = True
        print()
        print("Interrupted - writing pages generated so far")
    finally:
        if store is not None:
            store.close()

    try:
        output_path = write_snapshot(run.generated, output_path=args.output)
    except FileExistsError:
        print(f"ERROR: Snapshot already exists, not overwriting: {args.output}")
        return 1
    summary = run.summary()
    print_summary(summary, output_path, args.dry_run)

    if interrupted:
        return 130
    if summary["failed"] or summary["apply"]["by_status"].get(STATUS_FAILED):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
