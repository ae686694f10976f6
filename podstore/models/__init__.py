from podstore.models.identifier import ResourceIdentifier
from podstore.models.representation import Representation, RepresentationMetadata

__all__ = [
    "ResourceIdentifier",
    "Representation", "RepresentationMetadata",
]
