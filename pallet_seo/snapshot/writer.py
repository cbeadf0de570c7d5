"""
Snapshot writer and reader.

A snapshot is the JSON array of generated pages from one run, written once to
generated-<epoch-ms>.json and never modified afterwards. The applier reads it
back, so content can be inspected, diffed and replayed without regenerating.
"""

import json
import time
from pathlib import Path
from typing import Optional

from pallet_seo.config import SNAPSHOT_PREFIX, get_output_dir


def snapshot_filename(epoch_ms: Optional[int] = None) -> str:
    if epoch_ms is None:
        epoch_ms = int(time.time() * 1000)
    return f"{SNAPSHOT_PREFIX}{epoch_ms}.json"


def _snapshot_timestamp(path: Path) -> int:
    """Epoch-ms from a snapshot filename, -1 if the name does not carry one."""
    stem = path.stem[len(SNAPSHOT_PREFIX):]
    return int(stem) if stem.isdigit() else -1


def write_snapshot(pages: list, output_dir: Optional[Path] = None, output_path: Optional[Path] = None) -> Path:
    """
    Write pages to a new snapshot file.

    Args:
        pages: generated page dicts
        output_dir: directory for an auto-named file (default SEO_OUTPUT_DIR)
        output_path: explicit file path, overrides output_dir

    Returns:
        Path written

    Raises:
        FileExistsError: target already exists (snapshots are immutable)
    """
    if output_path is not None:
        path = Path(output_path)
    else:
        path = Path(output_dir or get_output_dir()) / snapshot_filename()

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "x", encoding="utf-8") as f:
        json.dump(pages, f, indent=2, ensure_ascii=False)
    return path


def find_latest_snapshot(output_dir: Optional[Path] = None) -> Path:
    """Find the most recent generated-*.json in output_dir."""
    directory = Path(output_dir or get_output_dir())
    if not directory.exists():
        raise FileNotFoundError(f"Output directory not found: {directory}. Run the generator first.")

    snapshots = [
        p for p in directory.glob(f"{SNAPSHOT_PREFIX}*.json")
        if p.is_file() and _snapshot_timestamp(p) >= 0
    ]
    if not snapshots:
        raise FileNotFoundError(f"No generated files found in {directory}. Run the generator first.")

    snapshots.sort(key=lambda p: (_snapshot_timestamp(p), p.name), reverse=True)
    return snapshots[0]


def load_snapshot(path: Path) -> list:
    """Load a snapshot file as a list of page dicts."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot not found: {path}")
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Snapshot must be a JSON array of pages: {path}")
    return data
