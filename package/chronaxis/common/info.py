import os
from importlib import import_module, metadata
from inspect import getfile
from pathlib import Path

PACKAGE_NAME = __name__.split(".")[0]
PACKAGE_PATH = Path(os.path.dirname(getfile(import_module(PACKAGE_NAME))))


def read_package_version() -> str:
    """Version of the installed distribution, or a placeholder from source."""
    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


PACKAGE_VERSION = read_package_version()
