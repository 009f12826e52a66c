"""Type definitions and enums for the Cheshire Cat API client."""

from enum import Enum


class CollectionName(str, Enum):
    """Vector memory collections kept by the Cheshire Cat."""

    EPISODIC = "episodic"  # Things the user said
    DECLARATIVE = "declarative"  # Ingested documents
    PROCEDURAL = "procedural"  # Tools and forms


class HTTPMethod(str, Enum):
    """HTTP verbs used by the API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
