"""
Path helpers for the slash-delimited identifier namespace.
"""

import re

from podstore.models.identifier import ResourceIdentifier

_TRAILING_SLASHES = re.compile(r"/+$")


def is_container_path(path: str) -> bool:
    """Containers are exactly the paths ending in a slash."""
    return path.endswith("/")


def is_container_identifier(identifier: ResourceIdentifier) -> bool:
    return is_container_path(identifier.path)


def trim_trailing_slashes(path: str) -> str:
    return _TRAILING_SLASHES.sub("", path)


def ensure_trailing_slash(path: str) -> str:
    """Collapse any run of trailing slashes to exactly one."""
    return trim_trailing_slashes(path) + "/"
