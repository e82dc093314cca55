"""HTTP API package: routers, middleware and error envelopes."""
