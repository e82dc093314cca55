"""Runtime environments for the ledger history API.

Settings uses the environment to pick environment-specific behavior
(log rendering, debug output).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
