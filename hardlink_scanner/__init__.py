"""Hardlink Scanner – Ordnergröße mit und ohne Hardlinks."""

__version__ = "1.0.0"

from .analyzer import AggregateResult, calculate_folder_size  # noqa: E402
from .walker import RootNotADirectoryError, RootNotFoundError  # noqa: E402

__all__ = [
    "AggregateResult",
    "RootNotADirectoryError",
    "RootNotFoundError",
    "__version__",
    "calculate_folder_size",
]
