"""
RDF vocabularies used in resource metadata.
"""

from rdflib import Namespace

MA = Namespace("http://www.w3.org/ns/ma-ont#")

# Namespace is a str subclass, so attribute access would hit str.format
CONTENT_TYPE = MA["format"]

__all__ = ["CONTENT_TYPE", "MA"]
