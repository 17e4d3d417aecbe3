"""Cleanup utilities for the wiki output root."""

from __future__ import annotations

import shutil
from pathlib import Path

from .errors import BuildError


def check_output_root(root: Path, output_root: Path) -> None:
    """Refuse an output root that is not a directory strictly inside root."""

    resolved_root = root.resolve()
    resolved_output = output_root.resolve()
    if resolved_root not in resolved_output.parents:
        raise BuildError(
            "output dir",
            f"{output_root} is not a directory inside {root}",
        )


def remove_stale_listing(path: Path) -> None:
    """Delete the listing left by a previous run, if any."""

    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        raise BuildError("list remove", exc) from exc
    print(f"Removed {path.name}")


def recreate_output_root(path: Path) -> bool:
    """Remove ``path`` if present and create it empty.

    Returns True when a previous output root was removed.
    """

    try:
        existed = path.exists()
    except OSError as exc:
        raise BuildError("dir check", exc) from exc

    if existed:
        try:
            shutil.rmtree(path)
        except OSError as exc:
            raise BuildError("dir remove", exc) from exc

    try:
        path.mkdir()
    except OSError as exc:
        raise BuildError("mkdir", exc) from exc

    if existed:
        print(f"Removed and re-created {path.name} directory")
    else:
        print(f"Created {path.name} directory")
    return existed
