"""
Representation models.

RepresentationMetadata is an in-memory graph of statements about one
resource. It is built fresh on every read and serialized fresh on every
write; it is never stored as anything other than Turtle bytes.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from rdflib import Graph, Literal, URIRef
from rdflib.term import Node

from podstore.models.identifier import ResourceIdentifier
from podstore.util.vocabularies import CONTENT_TYPE

Triple = tuple[Node, Node, Node]


def _to_term(value: Any) -> Node:
    if isinstance(value, Node):
        return value
    if isinstance(value, ResourceIdentifier):
        return URIRef(value.path)
    return Literal(value)


class RepresentationMetadata:
    """Statements describing a single resource, keyed by its identifier."""

    def __init__(
        self,
        identifier: ResourceIdentifier,
        content_type: Optional[str] = None,
    ):
        self.identifier = identifier
        self.graph = Graph()
        if content_type:
            self.content_type = content_type

    @property
    def subject(self) -> URIRef:
        return URIRef(self.identifier.path)

    def triples(self) -> list[Triple]:
        """All statements, in no particular order."""
        return list(self.graph)

    def add_triples(self, triples: Iterable[Triple]) -> "RepresentationMetadata":
        for triple in triples:
            self.graph.add(triple)
        return self

    def add(self, predicate: URIRef, obj: Any) -> "RepresentationMetadata":
        self.graph.add((self.subject, predicate, _to_term(obj)))
        return self

    def set(self, predicate: URIRef, obj: Any) -> "RepresentationMetadata":
        """Replace every value of ``predicate`` with ``obj``."""
        self.graph.remove((self.subject, predicate, None))
        return self.add(predicate, obj)

    def remove(self, predicate: URIRef, obj: Any = None) -> "RepresentationMetadata":
        term = None if obj is None else _to_term(obj)
        self.graph.remove((self.subject, predicate, term))
        return self

    def get(self, predicate: URIRef) -> Optional[Node]:
        """
        Single value of ``predicate``.

        Raises:
            ValueError: If the predicate has more than one value
        """
        values = self.get_all(predicate)
        if len(values) > 1:
            raise ValueError(
                f"Multiple results for {predicate} on {self.identifier.path}"
            )
        return values[0] if values else None

    def get_all(self, predicate: URIRef) -> list[Node]:
        return list(self.graph.objects(self.subject, predicate))

    @property
    def content_type(self) -> Optional[str]:
        value = self.get(CONTENT_TYPE)
        return str(value) if value is not None else None

    @content_type.setter
    def content_type(self, value: Optional[str]) -> None:
        if value is None:
            self.remove(CONTENT_TYPE)
        else:
            self.set(CONTENT_TYPE, value)

    def __len__(self) -> int:
        return len(self.graph)

    def __repr__(self) -> str:
        return f"RepresentationMetadata({self.identifier.path!r}, {len(self)} statements)"


@dataclass
class Representation:
    """A resource's data stream together with its metadata."""

    metadata: RepresentationMetadata
    data: Any                         # binary stream, or a structured value when binary is False
    binary: bool = True
