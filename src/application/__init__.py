"""Application layer - Use cases and orchestration.

Structure:
- queries/: Query dataclasses and handlers (cache-aside reads)
- dtos/: Result dataclasses and cache codecs
- errors/: ApplicationError taxonomy

The application layer orchestrates domain ports but contains no
infrastructure code.
"""
