"""
Single-root identifier strategy.

Every supported identifier lives below one base path (or URL); the base
itself is the root container.
"""

from podstore.interfaces.identifier_strategy import IdentifierStrategy
from podstore.models.identifier import ResourceIdentifier
from podstore.util.paths import ensure_trailing_slash, trim_trailing_slashes


class SingleRootIdentifierStrategy(IdentifierStrategy):
    """Namespace with a single root container at ``base_url``."""

    def __init__(self, base_url: str = "/"):
        self.base_url = ensure_trailing_slash(base_url)

    def supports_identifier(self, identifier: ResourceIdentifier) -> bool:
        return identifier.path.startswith(self.base_url)

    def is_root_container(self, identifier: ResourceIdentifier) -> bool:
        return identifier.path == self.base_url

    def get_parent_container(self, identifier: ResourceIdentifier) -> ResourceIdentifier:
        if not self.supports_identifier(identifier):
            raise ValueError(f"{identifier.path} is not supported by this strategy")
        if self.is_root_container(identifier):
            raise ValueError(f"Cannot obtain the parent of root container {identifier.path}")

        # Drop the last segment, keeping the slash before it
        trimmed = trim_trailing_slashes(identifier.path)
        return ResourceIdentifier(trimmed[: trimmed.rindex("/") + 1])
