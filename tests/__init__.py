"""Test suite for the ledger history API.

Test structure:
- unit/: Unit tests - handlers, adapters and repositories with fakes
- api/: API endpoint tests - HTTP layer through FastAPI TestClient
"""
