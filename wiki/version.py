"""Version metadata reported by the CLI and the page footer."""

__version__ = "0.3.1"
PROJECT_URL = "https://github.com/maciakl/mdwi"
