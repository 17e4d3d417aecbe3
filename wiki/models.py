"""Shared dataclasses for wiki builds."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(slots=True)
class ListingEntry:
    """A single line of the generated list of pages."""

    title: str
    href: str

    def to_markdown(self) -> str:
        return f"- [{self.title}]({self.href})"


@dataclass(slots=True)
class WikiBuildResult:
    """Outputs of a wiki build, returned to the driver."""

    output_root: Path
    recreated: bool
    pages: List[Path] = field(default_factory=list)
    listing_page: Path | None = None
    assets: List[Path] = field(default_factory=list)
