"""
Identifier Strategy Interface

Answers structural questions about identifiers: which ones this server
handles, which ones are containers, and how they nest.
Implementations: SingleRootIdentifierStrategy.
"""

from abc import ABC, abstractmethod

from podstore.models.identifier import ResourceIdentifier
from podstore.util.paths import ensure_trailing_slash, is_container_identifier


class IdentifierStrategy(ABC):
    """Abstract base class for identifier classification."""

    @abstractmethod
    def supports_identifier(self, identifier: ResourceIdentifier) -> bool:
        """Whether the identifier falls inside the namespace handled here."""
        ...

    @abstractmethod
    def get_parent_container(self, identifier: ResourceIdentifier) -> ResourceIdentifier:
        """
        Container directly holding ``identifier``.

        Raises:
            ValueError: For the root container or unsupported identifiers
        """
        ...

    @abstractmethod
    def is_root_container(self, identifier: ResourceIdentifier) -> bool:
        ...

    def is_container(self, identifier: ResourceIdentifier) -> bool:
        """Containers are the identifiers whose path ends in a slash."""
        return is_container_identifier(identifier)

    def contains(
        self,
        container: ResourceIdentifier,
        identifier: ResourceIdentifier,
        transitive: bool = False,
    ) -> bool:
        """Whether ``identifier`` sits below ``container``."""
        prefix = ensure_trailing_slash(container.path)
        if identifier.path == prefix or not identifier.path.startswith(prefix):
            return False
        if transitive:
            return True
        return self.get_parent_container(identifier).path == prefix
