"""
Turtle (de)serialization of metadata statements.

Identifiers in this namespace are plain paths such as ``/docs/a.txt``, which
are not absolute IRIs. The Turtle parser only resolves relative references
against an absolute base, so a path base is parsed against a placeholder
origin and every IRI under that origin is mapped back to a bare path
afterwards. Absolute bases are used as they are.
"""

from typing import Iterable, Union
from urllib.parse import urlparse

from rdflib import Graph, URIRef
from rdflib.term import Node

Triple = tuple[Node, Node, Node]

TURTLE = "turtle"
_PLACEHOLDER_ORIGIN = "http://podstore.invalid"


def serialize_quads(triples: Iterable[Triple]) -> bytes:
    """Serialize statements as UTF-8 Turtle."""
    graph = Graph()
    for triple in triples:
        graph.add(triple)
    return graph.serialize(format=TURTLE, encoding="utf-8")


def _is_absolute(iri: str) -> bool:
    return bool(urlparse(iri).scheme)


def _unplace(node: Node) -> Node:
    if isinstance(node, URIRef) and str(node).startswith(_PLACEHOLDER_ORIGIN + "/"):
        return URIRef(str(node)[len(_PLACEHOLDER_ORIGIN):])
    return node


def parse_quads(data: Union[bytes, str], base_iri: str) -> list[Triple]:
    """
    Parse Turtle into a list of statements.

    Args:
        data: Turtle document
        base_iri: Base for relative references (a path or an absolute IRI)

    Raises:
        rdflib.plugins.parsers.notation3.BadSyntax: On malformed input
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8")

    if _is_absolute(base_iri):
        graph = Graph()
        graph.parse(data=data, format=TURTLE, publicID=base_iri)
        return list(graph)

    path = base_iri if base_iri.startswith("/") else "/" + base_iri
    graph = Graph()
    graph.parse(data=data, format=TURTLE, publicID=_PLACEHOLDER_ORIGIN + path)
    return [tuple(_unplace(node) for node in triple) for triple in graph]
