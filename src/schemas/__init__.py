"""Pydantic request/response schemas for the HTTP layer."""
