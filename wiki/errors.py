"""Exceptions raised while building wiki pages."""

from __future__ import annotations


class BuildError(Exception):
    """Raised when a build step fails; ``tag`` names the failing step."""

    def __init__(self, tag: str, detail: object) -> None:
        super().__init__(f"Error ({tag}): {detail}")
        self.tag = tag
        self.detail = detail


class MissingPrerequisiteError(BuildError):
    """Raised when pandoc or an input document cannot be found."""

    def __init__(self, detail: str) -> None:
        super().__init__("prerequisite", detail)
        self.args = (f"Error: {detail}",)


class ConverterError(BuildError):
    """Raised when pandoc fails; keeps the converter's own diagnostics."""

    def __init__(self, source: object, diagnostics: str | None) -> None:
        super().__init__("pandoc", f"failed to convert {source}")
        self.diagnostics = (diagnostics or "").strip()
        if self.diagnostics:
            self.args = (f"{self.args[0]}\n{self.diagnostics}",)
