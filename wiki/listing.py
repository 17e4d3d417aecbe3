"""Build the generated "List of Pages" document."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .errors import BuildError
from .injection import path_escape
from .models import ListingEntry

LISTING_HEADING = "# List of Pages"


def listing_entry(document: Path, output_name: str) -> ListingEntry:
    """Return the entry linking ``document`` to its converted page."""

    return ListingEntry(title=document.stem, href=path_escape(output_name))


def is_generated_listing(path: Path) -> bool:
    """Return True when ``path`` holds a listing written by an earlier build."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            first_line = handle.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError("list check", exc) from exc
    return first_line.rstrip("\n") == LISTING_HEADING


def check_listing_target(path: Path, root: Path) -> None:
    """Refuse to replace a file that is not a previously generated listing."""

    if path.resolve().parent != root.resolve():
        raise BuildError(
            "list check", f"{path} is not a file directly inside {root}"
        )
    if path.exists() and not is_generated_listing(path):
        raise BuildError(
            "list check",
            f"{path.name} is not a generated page list; refusing to replace it",
        )


def render_listing(entries: Iterable[ListingEntry]) -> str:
    lines: List[str] = [LISTING_HEADING, ""]
    lines.extend(entry.to_markdown() for entry in entries)
    return "\n".join(lines) + "\n"


def write_listing(path: Path, entries: Iterable[ListingEntry]) -> Path:
    """Persist the listing Markdown at ``path`` and return it."""

    try:
        path.write_text(render_listing(entries), encoding="utf-8")
    except OSError as exc:
        raise BuildError("list write", exc) from exc
    print(f"Created {path.name}")
    return path
