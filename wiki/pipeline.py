"""High-level orchestration for wiki and standalone builds."""

from __future__ import annotations

import shutil
from functools import partial
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from config_loader import BuildSettings
from pandoc_runner import convert_document, pandoc_available

from .assets import FAVICON_NAME, STYLESHEET_NAME, favicon_svg, stylesheet
from .cleanup import (
    check_output_root,
    recreate_output_root,
    remove_stale_listing,
)
from .errors import BuildError, ConverterError, MissingPrerequisiteError
from .injection import SITE_RULES, STANDALONE_RULES, Rule, apply_rules
from .listing import check_listing_target, listing_entry, write_listing
from .models import ListingEntry, WikiBuildResult
from .version import __version__

Converter = Callable[[Path, Path], Tuple[bool, Optional[str]]]

HOME_PAGE_STEM = "index"
LISTING_PAGE = "list.html"


def require_pandoc(executable: str) -> None:
    if not pandoc_available(executable):
        raise MissingPrerequisiteError(f"{executable} is not installed.")


def pandoc_converter(executable: str) -> Converter:
    """Return a converter bound to ``executable`` after checking PATH."""

    require_pandoc(executable)
    return partial(convert_document, executable=executable)


def _display(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def _write_text(path: Path, content: str, *, tag: str, message: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise BuildError(tag, exc) from exc
    print(message)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError("html read", exc) from exc


def convert_page(
    converter: Converter, source: Path, destination: Path, root: Path
) -> Path:
    """Run ``converter`` once and raise ConverterError when it fails."""

    success, diagnostics = converter(source, destination)
    if not success:
        raise ConverterError(source.name, diagnostics)
    print(f"Converted {_display(source, root)} to {_display(destination, root)}")
    return destination


def rewrite_page(path: Path, rules: Iterable[Rule], root: Path) -> None:
    """Apply ``rules`` to the HTML at ``path`` and write it back in place."""

    content = apply_rules(_read_text(path), rules)
    _write_text(
        path,
        content,
        tag="html inject",
        message=f"Updated {_display(path, root)}",
    )


def find_documents(root: Path, extensions: Iterable[str]) -> List[Path]:
    """Return the input documents directly inside ``root``, sorted by name."""

    suffixes = tuple(extensions)
    try:
        return sorted(
            path
            for path in root.iterdir()
            if path.is_file() and path.suffix in suffixes
        )
    except OSError as exc:
        raise BuildError("md find", exc) from exc


def write_site_assets(output_root: Path, root: Path) -> None:
    css_path = output_root / STYLESHEET_NAME
    _write_text(
        css_path,
        stylesheet(),
        tag="css write",
        message=f"Created {_display(css_path, root)}",
    )
    favicon_path = output_root / FAVICON_NAME
    _write_text(
        favicon_path,
        favicon_svg(),
        tag="favicon write",
        message=f"Created {_display(favicon_path, root)}",
    )


def copy_assets(
    root: Path, output_root: Path, patterns: Iterable[str]
) -> List[Path]:
    """Copy matching image files from ``root`` into ``output_root``."""

    copied: List[Path] = []
    for pattern in patterns:
        for source in sorted(root.glob(pattern)):
            if not source.is_file():
                continue
            destination = output_root / source.name
            try:
                shutil.copy2(source, destination)
            except OSError as exc:
                raise BuildError(f"{pattern} copy", exc) from exc
            print(f"Copied {source.name} to {_display(destination, root)}")
            copied.append(destination)
    return copied


def build_wiki(
    root: Path | None = None,
    *,
    settings: BuildSettings | None = None,
    converter: Converter | None = None,
) -> WikiBuildResult:
    """Convert every document in ``root`` into a browsable wiki."""

    root = Path(root) if root is not None else Path.cwd()
    settings = settings or BuildSettings()
    if converter is None:
        converter = pandoc_converter(settings.pandoc_executable)

    print(f"Generating wiki using mdwi version {__version__} ...")

    output_root = root / settings.output_dir
    listing_path = root / settings.listing_file
    check_output_root(root, output_root)
    check_listing_target(listing_path, root)

    recreated = recreate_output_root(output_root)
    write_site_assets(output_root, root)

    remove_stale_listing(listing_path)

    pages: List[Path] = []
    entries: List[ListingEntry] = []
    for document in find_documents(root, settings.document_extensions):
        output_name = f"{document.stem}.html"
        pages.append(
            convert_page(converter, document, output_root / output_name, root)
        )
        if document.stem != HOME_PAGE_STEM:
            entries.append(listing_entry(document, output_name))

    listing_source = write_listing(listing_path, entries)
    listing_page = convert_page(
        converter, listing_source, output_root / LISTING_PAGE, root
    )

    for html_file in sorted(output_root.glob("*.html")):
        rewrite_page(html_file, SITE_RULES, root)

    assets = copy_assets(root, output_root, settings.asset_patterns)

    print("Done!")
    return WikiBuildResult(
        output_root=output_root,
        recreated=recreated,
        pages=pages,
        listing_page=listing_page,
        assets=assets,
    )


def build_standalone(
    source: Path | str,
    *,
    converter: Converter | None = None,
    executable: str = "pandoc",
) -> Path:
    """Build one self-contained HTML file next to ``source``."""

    source = Path(source)
    if converter is None:
        converter = pandoc_converter(executable)
    if not source.is_file():
        raise MissingPrerequisiteError(f"input file does not exist: {source}")

    output_file = source.with_suffix(".html")
    if output_file == source:
        raise BuildError("standalone", f"input is already HTML: {source}")

    root = source.parent
    print(f"Generating standalone HTML file: {output_file}")
    convert_page(converter, source, output_file, root)

    print(f"Injecting custom HTML into {output_file}")
    content = apply_rules(_read_text(output_file), STANDALONE_RULES)
    _write_text(
        output_file,
        content,
        tag="html inject",
        message=f"Generated {output_file}",
    )
    return output_file
