"""zombiesplit: split timing with a digit-by-digit time editor."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("zombiesplit")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
