"""Helpers for converting documents into HTML pages with pandoc."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import List, Tuple

try:
    from bs4 import BeautifulSoup  # type: ignore[import-not-found]
except ImportError as exc:  # pragma: no cover - surfaces missing dependency
    raise SystemExit(
        "Missing dependency 'beautifulsoup4'. Install with pip install"
        " beautifulsoup4 lxml"
    ) from exc

DEFAULT_EXECUTABLE = "pandoc"
STYLESHEET_HREF = "style.css"


def pandoc_available(executable: str = DEFAULT_EXECUTABLE) -> bool:
    """Return True when ``executable`` can be found on PATH."""

    return shutil.which(executable) is not None


def pandoc_command(
    source: Path, destination: Path, executable: str = DEFAULT_EXECUTABLE
) -> List[str]:
    return [
        executable,
        "--standalone",
        "--toc",
        f"--css={STYLESHEET_HREF}",
        "--to=html5",
        "-o",
        str(destination),
        str(source),
    ]


def _is_standalone_html(destination: Path) -> bool:
    """Return True when the page parses with a <head>, as --standalone emits."""

    with destination.open("r", encoding="utf-8") as handle:
        soup = BeautifulSoup(handle, "lxml")
    return soup.find("head") is not None


def convert_document(
    source: str | Path,
    destination: str | Path,
    executable: str = DEFAULT_EXECUTABLE,
) -> Tuple[bool, str | None]:
    """Convert ``source`` into a standalone HTML5 page at ``destination``.

    Returns ``(True, None)`` on success, otherwise ``(False, diagnostics)``
    where diagnostics holds pandoc's own output when there was any.
    """

    source = Path(source)
    destination = Path(destination)
    command = pandoc_command(source, destination, executable)

    try:
        completed = subprocess.run(
            command, check=False, capture_output=True, text=True
        )
    except OSError as exc:
        return False, str(exc)

    if completed.returncode != 0:
        message_parts = [f"exit status {completed.returncode}"]
        stdout = completed.stdout.strip()
        stderr = completed.stderr.strip()
        if stdout:
            message_parts.append(stdout)
        if stderr:
            message_parts.append(stderr)
        return False, "\n".join(message_parts)

    if not destination.exists():
        return False, f"pandoc produced no output at {destination}"

    try:
        if not _is_standalone_html(destination):
            return False, f"pandoc output is not an HTML document: {destination}"
    except (OSError, UnicodeDecodeError) as exc:
        return False, str(exc)

    return True, None


__all__ = ["convert_document", "pandoc_available", "pandoc_command"]
