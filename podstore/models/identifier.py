"""
Resource identifier — names one resource in the logical namespace.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceIdentifier:
    """
    Opaque path naming a document or a container.

    Containers end with a slash (``/photos/``), documents do not
    (``/photos/cat.png``).
    """

    path: str

    def __str__(self) -> str:
        return self.path
