#!/usr/bin/env python3
"""
Apply Generated SEO Content

################################################################################
# WRITES TO THE CATEGORY PAGE STORE
################################################################################
#
# Patches ONLY the content fields of category pages that already exist:
#   metaDescription, heroText, featuredSuppliersText, centeredValueH2,
#   centeredValueText, contentBlocks, faqSectionH2, faqs
#
# NEVER:
#   - Creates or deletes pages
#   - Touches images, titles, slugs, indexing flags or manual overrides
#   - Persists an entry that fails schema validation
#
# Re-applying the same snapshot is a no-op (every page reports UNCHANGED),
# so a partially applied run is recovered by running this again.
################################################################################

Usage:
    seo-apply                                  # latest snapshot in SEO_OUTPUT_DIR
    seo-apply --file=output/generated-1712345678901.json
    seo-apply --slug=amazon-liquidation --dry-run

Output:
    <snapshot>.results.json next to the snapshot

Store:
    DATABASE_URL=sqlite:///<path> or file:<path>. PostgreSQL URLs are rejected
    at startup; apply to a SQLite copy of the CategoryPage table.
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pallet_seo.apply.store import STORE_URL_HELP, PageStore, open_page_store
from pallet_seo.config import get_database_url, load_env
from pallet_seo.errors import FatalConfigError, NotFoundError, SchemaValidationError
from pallet_seo.generate.validate import REQUIRED_FIELDS, content_only, validate_content
from pallet_seo.snapshot.writer import find_latest_snapshot, load_snapshot

CONTENT_FIELDS = list(REQUIRED_FIELDS)

STATUS_UPDATED = "UPDATED"
STATUS_UNCHANGED = "UNCHANGED"
STATUS_WOULD_UPDATE = "WOULD_UPDATE"
STATUS_NOT_FOUND = "NOT_FOUND"
STATUS_INVALID = "INVALID"
STATUS_FAILED = "FAILED"


def changed_content_fields(existing: dict, content: dict) -> list:
    """Content fields whose stored value differs from the generated one."""
    return [field for field in CONTENT_FIELDS if existing.get(field) != content.get(field)]


# =============================================================================
# APPLIER
# =============================================================================


class Applier:
    """Applies generated pages to existing store records, by slug."""

    def __init__(self, store: PageStore, dry_run: bool = False):
        self.store = store
        self.dry_run = dry_run

    def apply_page(self, page: dict) -> dict:
        """Apply one snapshot entry. Never raises for per-page problems."""
        slug = page.get("slug") if isinstance(page, dict) else None
        result = {
            "slug": slug,
            "status": "PENDING",
            "dry_run": self.dry_run,
            "changed_fields": [],
            "message": None,
            "applied_at": None,
        }

        try:
            if not slug:
                raise SchemaValidationError("Snapshot entry has no slug")
            content = content_only(validate_content(page))

            existing = self.store.find_by_slug(slug)
            if existing is None:
                raise NotFoundError(f"Page not found in DB: {slug}")

            changed = changed_content_fields(existing, content)
            result["changed_fields"] = changed

            if not changed:
                result["status"] = STATUS_UNCHANGED
                result["message"] = f"{slug} already up to date"
            elif self.dry_run:
                result["status"] = STATUS_WOULD_UPDATE
                result["message"] = f"Would update {slug} ({len(changed)} fields)"
            else:
                self.store.update_by_id(existing["id"], content)
                result["status"] = STATUS_UPDATED
                result["message"] = f"Updated {slug} ({len(changed)} fields)"

        except SchemaValidationError as e:
            result["status"] = STATUS_INVALID
            result["message"] = f"Invalid snapshot entry {slug}: {e}"
        except NotFoundError as e:
            result["status"] = STATUS_NOT_FOUND
            result["message"] = str(e)
        except Exception as e:
            result["status"] = STATUS_FAILED
            result["message"] = f"Failed to update {slug}: {e}"

        result["applied_at"] = datetime.now(timezone.utc).isoformat()
        return result

    def apply_snapshot(self, pages: list, slug: Optional[str] = None) -> list:
        """
        Apply every entry (or the one matching slug) in snapshot order.

        Raises:
            NotFoundError: slug given but not present in the snapshot
        """
        if slug:
            pages = [p for p in pages if isinstance(p, dict) and p.get("slug") == slug]
            if not pages:
                raise NotFoundError(f"No page found with slug: {slug}")

        results = []
        for i, page in enumerate(pages, 1):
            if isinstance(page, dict):
                label = f"{page.get('displayName', '?')} ({page.get('slug', '?')})"
            else:
                label = "(malformed entry)"
            print(f"[{i}/{len(pages)}] {label}")
            result = self.apply_page(page)
            print(f"  [{result['status']}] {result['message']}")
            results.append(result)
        return results


def summarize(results: list) -> dict:
    by_status = {}
    for r in results:
        status = r.get("status", "UNKNOWN")
        by_status[status] = by_status.get(status, 0) + 1
    return {"total_pages": len(results), "by_status": by_status}


def write_results(snapshot_path: Path, results: list, dry_run: bool) -> Path:
    """Write the audit trail next to the snapshot."""
    snapshot_path = Path(snapshot_path)
    results_path = snapshot_path.with_name(f"{snapshot_path.stem}.results.json")
    payload = {
        "snapshot": snapshot_path.name,
        "execution_mode": "DRY_RUN" if dry_run else "APPLY",
        "written_utc": datetime.now(timezone.utc).isoformat(),
        "summary": summarize(results),
        "results": results,
    }
    with open(results_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    return results_path


# =============================================================================
# CLI
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seo-apply",
        description="Apply a generated content snapshot to existing category pages",
        epilog=STORE_URL_HELP,
    )
    parser.add_argument("--file", help="Snapshot to apply (default: latest in SEO_OUTPUT_DIR)")
    parser.add_argument("--slug", help="Only apply the page with this slug")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Look pages up and report what would change, without writing",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    print("=" * 70)
    print("APPLY GENERATED SEO CONTENT")
    print("=" * 70)
    print()

    env_path = load_env()
    if env_path:
        print(f"Loaded {env_path}")

    try:
        if args.file:
            snapshot_path = Path(args.file)
            print(f"Using specified file: {snapshot_path}")
        else:
            snapshot_path = find_latest_snapshot()
            print(f"Using latest file: {snapshot_path.name}")
        pages = load_snapshot(snapshot_path)
        store = open_page_store(get_database_url())
    except (FileNotFoundError, ValueError, FatalConfigError) as e:
        print(f"ERROR: {e}")
        return 1

    print(f"Loaded {len(pages)} pages from file")
    if args.slug:
        print(f"Filtering to slug: {args.slug}")
    if args.dry_run:
        print("DRY_RUN mode - no changes will be made")
    print()

    applier = Applier(store, dry_run=args.dry_run)
    try:
        results = applier.apply_snapshot(pages, slug=args.slug)
    except NotFoundError as e:
        print(f"ERROR: {e}")
        return 1
    finally:
        store.close()

    results_path = write_results(snapshot_path, results, args.dry_run)
    summary = summarize(results)

    print()
    print("=" * 70)
    print("APPLY SUMMARY")
    print("=" * 70)
    print(f"Total pages: {summary['total_pages']}")
    for status, count in summary["by_status"].items():
        print(f"  {status}: {count}")
    print(f"Results: {results_path}")
    if args.dry_run:
        print()
        print("DRY_RUN - no database changes made. Run without --dry-run to apply.")

    return 1 if summary["by_status"].get(STATUS_FAILED) else 0


if __name__ == "__main__":
    sys.exit(main())
