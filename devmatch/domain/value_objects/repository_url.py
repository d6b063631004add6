"""Repository URL value object.

Links a project to its source repository. Only GitHub, GitLab and Bitbucket
repository URLs of the form ``host/owner/repository`` are accepted; the
scheme and a ``www.`` prefix are optional on input.

Normalization:
    - ``https://`` is prepended when no scheme is given
    - ``www.`` is removed
    - a trailing ``/`` is removed

Two RepositoryUrl objects are equal when their normalized forms match, so
``github.com/acme/api`` and ``https://www.github.com/acme/api/`` are the
same repository.
"""

import re
from dataclasses import dataclass, field
from urllib.parse import urlsplit

_OWNER_REPO = r"/[a-z0-9-]+/[a-z0-9_.-]+/?$"

_PROVIDER_PATTERNS: dict[str, re.Pattern[str]] = {
    "GitHub": re.compile(r"^(https?://)?(www\.)?github\.com" + _OWNER_REPO),
    "GitLab": re.compile(r"^(https?://)?(www\.)?gitlab\.com" + _OWNER_REPO),
    "Bitbucket": re.compile(r"^(https?://)?(www\.)?bitbucket\.org" + _OWNER_REPO),
}


def _is_parseable(url: str) -> bool:
    if any(ch.isspace() for ch in url):
        return False
    try:
        urlsplit(url)
    except ValueError:
        return False
    return True


def _normalize(url: str) -> str:
    if not url.startswith("http"):
        url = "https://" + url
    url = url.replace("www.", "")
    return url.removesuffix("/")


@dataclass(frozen=True)
class RepositoryUrl:
    """Validated source repository URL.

    Attributes:
        value: URL as provided (trimmed).
        normalized: Canonical form used for equality and display.

    Raises:
        ValueError: If the URL is blank, malformed, or not hosted on a
            supported provider.

    Example:
        >>> url = RepositoryUrl("www.github.com/acme/tracker/")
        >>> url.normalized
        'https://github.com/acme/tracker'
        >>> url.owner, url.repository_name
        ('acme', 'tracker')
    """

    value: str = field(compare=False)
    normalized: str = field(init=False)

    def __post_init__(self) -> None:
        """Validate the URL and compute its normalized form.

        Raises:
            ValueError: If the URL is invalid or unsupported.
        """
        if self.value is None:
            raise ValueError("Repository URL cannot be null")
        trimmed = self.value.strip()
        if not trimmed:
            raise ValueError("Repository URL cannot be empty")
        if not _is_parseable(trimmed):
            raise ValueError("Repository URL is not a valid URL")
        if not any(p.match(trimmed.lower()) for p in _PROVIDER_PATTERNS.values()):
            raise ValueError("Only GitHub, GitLab and Bitbucket repositories are supported")

        object.__setattr__(self, "value", trimmed)
        object.__setattr__(self, "normalized", _normalize(trimmed))

    @property
    def provider(self) -> str:
        """Hosting provider name: "GitHub", "GitLab" or "Bitbucket"."""
        lowered = self.normalized.lower()
        for name, pattern in _PROVIDER_PATTERNS.items():
            if pattern.match(lowered):
                return name
        return "Unknown"

    @property
    def owner(self) -> str | None:
        """Repository owner (user or organization) segment."""
        parts = self.normalized.split("/")
        return parts[3] if len(parts) >= 4 else None

    @property
    def repository_name(self) -> str | None:
        """Repository name segment."""
        parts = self.normalized.split("/")
        return parts[4] if len(parts) >= 5 else None

    def is_github(self) -> bool:
        return self.provider == "GitHub"

    def is_gitlab(self) -> bool:
        return self.provider == "GitLab"

    def is_bitbucket(self) -> bool:
        return self.provider == "Bitbucket"

    @property
    def api_url(self) -> str | None:
        """Provider REST API URL for the repository (GitHub and GitLab only).

        Returns:
            API URL string, or None for Bitbucket.
        """
        if self.is_github():
            return f"https://api.github.com/repos/{self.owner}/{self.repository_name}"
        if self.is_gitlab():
            return (
                f"https://gitlab.com/api/v4/projects/{self.owner}%2F{self.repository_name}"
            )
        return None

    def __str__(self) -> str:
        return self.normalized
