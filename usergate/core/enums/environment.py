"""Application environment types.

Used by Settings and the container to pick environment-specific behavior
(e.g. JSON logs in testing/ci, colored console logs in development).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
