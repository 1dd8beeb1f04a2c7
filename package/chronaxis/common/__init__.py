"""Common utilities and shared functionality."""

from .info import PACKAGE_NAME, PACKAGE_PATH, PACKAGE_VERSION

__all__ = [
    "PACKAGE_NAME",
    "PACKAGE_PATH",
    "PACKAGE_VERSION",
]
