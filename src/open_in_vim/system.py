"""Host operating system checks."""

import os


def is_windows() -> bool:
    """Return whether the current host runs Windows."""
    return os.name == "nt"
