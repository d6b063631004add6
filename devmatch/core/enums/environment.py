"""Runtime environments for the DevMatch core.

Settings use the environment to pick the logging renderer and to decide
whether verbose SQL echo is acceptable.

Environments:
- DEVELOPMENT: Local work, human-readable console logs
- TESTING: Automated test execution against a throwaway database
- CI: Continuous integration runs (JSON logs)
- PRODUCTION: Deployed service (JSON logs, no SQL echo)
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def uses_json_logs(self) -> bool:
        """Whether logs should be rendered as JSON lines."""
        return self is not Environment.DEVELOPMENT
