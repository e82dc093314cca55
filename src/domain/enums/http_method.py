"""HTTP method enumeration for access log records.

Persisted through the PostgreSQL enum type ``http_method_enum``.
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verb of an audited request."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
