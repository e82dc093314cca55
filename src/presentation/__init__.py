"""Presentation layer - API endpoints and HTTP concerns.

The presentation layer is thin: it binds headers and query parameters,
dispatches queries to the application layer and wraps results in the
``{meta, data}`` envelope.

Structure:
- api/v1/: Transaction history endpoints and error envelopes
- api/middleware/: Request trace IDs

Contains NO business logic.
"""
