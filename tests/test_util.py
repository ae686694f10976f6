"""
Utility tests: guarded streams, Turtle (de)serialization, paths and
identifier strategy.
"""

import io
import logging
import sys
from pathlib import Path

import pytest
from rdflib import Literal, URIRef
from rdflib.namespace import DC, DCTERMS

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from podstore.identifiers.single_root import SingleRootIdentifierStrategy
from podstore.models.identifier import ResourceIdentifier
from podstore.models.representation import RepresentationMetadata
from podstore.util.guarded_stream import GuardedStream, guard_stream, is_guarded
from podstore.util.paths import ensure_trailing_slash, is_container_path, trim_trailing_slashes
from podstore.util.quads import parse_quads, serialize_quads
from podstore.util.vocabularies import CONTENT_TYPE


class FlakyStream:
    """Returns one chunk, then fails."""

    def __init__(self):
        self.calls = 0

    def read(self, size=-1):
        self.calls += 1
        if self.calls == 1:
            return b"first"
        raise ConnectionError("connection reset")


# --- Guarded stream ---


def test_guard_bytes():
    stream = guard_stream(b"payload")
    assert stream.read() == b"payload"
    assert stream.read() == b""


def test_guard_is_idempotent():
    stream = guard_stream(io.BytesIO(b"x"))
    assert guard_stream(stream) is stream
    assert is_guarded(stream)
    assert not is_guarded(io.BytesIO())


def test_guard_rejects_non_streams():
    with pytest.raises(TypeError):
        GuardedStream(42)


def test_iterates_in_chunks():
    stream = guard_stream(io.BytesIO(b"abcdefg"))
    assert list(stream.iter_chunks(3)) == [b"abc", b"def", b"g"]


def test_consumption_error_is_observable(caplog):
    stream = guard_stream(FlakyStream())

    assert stream.read(5) == b"first"
    with caplog.at_level(logging.DEBUG, logger="podstore.stream"):
        with pytest.raises(ConnectionError):
            stream.read(5)
    assert isinstance(stream.error, ConnectionError)
    assert "connection reset" in caplog.text

    # The same failure keeps surfacing, the source isn't read again
    with pytest.raises(ConnectionError):
        stream.read(5)
    assert stream._stream.calls == 2


def test_close_and_context_manager():
    source = io.BytesIO(b"x")
    with guard_stream(source) as stream:
        assert stream.readable()
    assert stream.closed
    assert source.closed
    with pytest.raises(ValueError):
        stream.read()


# --- Turtle ---


def test_content_type_is_a_term():
    assert isinstance(CONTENT_TYPE, URIRef)
    assert CONTENT_TYPE == URIRef("http://www.w3.org/ns/ma-ont#format")


def test_turtle_round_trip_with_path_base():
    subject = URIRef("/docs/a.txt")
    triples = [
        (subject, CONTENT_TYPE, Literal("text/plain")),
        (subject, DCTERMS.isPartOf, URIRef("/docs/")),
        (subject, DCTERMS.extent, Literal(42)),
    ]

    data = serialize_quads(triples)

    assert isinstance(data, bytes)
    assert set(parse_quads(data, "/docs/a.txt")) == set(triples)


def test_turtle_relative_references_use_base():
    triples = parse_quads(b'<> <http://purl.org/dc/elements/1.1/title> "T" .', "/docs/a.txt")
    assert triples == [(URIRef("/docs/a.txt"), DC.title, Literal("T"))]


def test_turtle_absolute_base():
    triples = parse_quads('<> <http://purl.org/dc/elements/1.1/title> "T" .', "http://pod.example/a")
    assert triples == [(URIRef("http://pod.example/a"), DC.title, Literal("T"))]


def test_turtle_syntax_error():
    with pytest.raises(Exception):
        parse_quads(b"not turtle <<<", "/a")


# --- Metadata model ---


def test_metadata_accessors():
    metadata = RepresentationMetadata(ResourceIdentifier("/a"), content_type="text/turtle")
    assert metadata.content_type == "text/turtle"

    metadata.add(DC.title, "one").add(DC.title, "two")
    assert len(metadata.get_all(DC.title)) == 2
    with pytest.raises(ValueError):
        metadata.get(DC.title)

    metadata.set(DC.title, "only")
    assert metadata.get(DC.title) == Literal("only")

    metadata.remove(DC.title)
    metadata.content_type = None
    assert len(metadata) == 0


# --- Paths & identifier strategy ---


def test_paths():
    assert is_container_path("/a/")
    assert not is_container_path("/a")
    assert ensure_trailing_slash("a") == "a/"
    assert ensure_trailing_slash("a///") == "a/"
    assert trim_trailing_slashes("/a//") == "/a"


def test_single_root_strategy():
    strategy = SingleRootIdentifierStrategy("/pods")

    assert strategy.base_url == "/pods/"
    assert strategy.is_root_container(ResourceIdentifier("/pods/"))
    assert strategy.supports_identifier(ResourceIdentifier("/pods/a"))
    assert not strategy.supports_identifier(ResourceIdentifier("/other/a"))
    assert strategy.is_container(ResourceIdentifier("/pods/c/"))
    assert not strategy.is_container(ResourceIdentifier("/pods/c"))


def test_parent_container():
    strategy = SingleRootIdentifierStrategy("/")

    assert strategy.get_parent_container(ResourceIdentifier("/a/b/c")) == ResourceIdentifier("/a/b/")
    assert strategy.get_parent_container(ResourceIdentifier("/a/b/")) == ResourceIdentifier("/a/")
    assert strategy.get_parent_container(ResourceIdentifier("/a")) == ResourceIdentifier("/")
    with pytest.raises(ValueError):
        strategy.get_parent_container(ResourceIdentifier("/"))


def test_contains():
    strategy = SingleRootIdentifierStrategy("/")
    container = ResourceIdentifier("/c/")

    assert strategy.contains(container, ResourceIdentifier("/c/a"))
    assert not strategy.contains(container, ResourceIdentifier("/c/sub/a"))
    assert strategy.contains(container, ResourceIdentifier("/c/sub/a"), transitive=True)
    assert not strategy.contains(container, container)
    assert not strategy.contains(container, ResourceIdentifier("/cat"))
