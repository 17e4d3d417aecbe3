"""Page assembly for mdwi wiki and standalone builds."""

from .errors import BuildError, ConverterError, MissingPrerequisiteError
from .models import ListingEntry, WikiBuildResult
from .pipeline import build_standalone, build_wiki
from .version import __version__

__all__ = [
    "BuildError",
    "ConverterError",
    "ListingEntry",
    "MissingPrerequisiteError",
    "WikiBuildResult",
    "__version__",
    "build_standalone",
    "build_wiki",
]
