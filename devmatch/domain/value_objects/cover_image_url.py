"""Cover image URL value object.

Rules:
    - non-empty, at most 255 characters (column size)
    - must parse as a URL
    - path must end in jpg, jpeg, png, gif, webp or svg (query string allowed)
    - must use https
"""

import re
from dataclasses import dataclass, field
from urllib.parse import urlsplit

MAX_URL_LENGTH = 255

_IMAGE_PATTERN = re.compile(r"^(https?://).*\.(jpg|jpeg|png|gif|webp|svg)(\?.*)?$")

_FORMATS: dict[str, str] = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "png": "PNG",
    "gif": "GIF",
    "webp": "WEBP",
    "svg": "SVG",
}

TRUSTED_IMAGE_HOSTS: tuple[str, ...] = (
    "githubusercontent.com",
    "imgur.com",
    "cloudinary.com",
    "amazonaws.com",
    "googleusercontent.com",
)


@dataclass(frozen=True)
class CoverImageUrl:
    """Validated HTTPS image URL shown as a project's cover.

    Attributes:
        value: URL as provided (trimmed).
        normalized: URL with any ``www.`` prefix removed.

    Raises:
        ValueError: If the URL breaks a cover image rule.
    """

    value: str = field(compare=False)
    normalized: str = field(init=False)

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Cover image URL cannot be null")
        trimmed = self.value.strip()
        if not trimmed:
            raise ValueError("Cover image URL cannot be empty")
        if len(trimmed) > MAX_URL_LENGTH:
            raise ValueError(f"Cover image URL cannot exceed {MAX_URL_LENGTH} characters")
        if any(ch.isspace() for ch in trimmed):
            raise ValueError("Cover image URL is not a valid URL")
        try:
            urlsplit(trimmed)
        except ValueError as e:
            raise ValueError("Cover image URL is not a valid URL") from e
        if not _IMAGE_PATTERN.match(trimmed.lower()):
            raise ValueError(
                "Cover image URL must point to an image (jpg, jpeg, png, gif, webp, svg)"
            )
        if not trimmed.lower().startswith("https://"):
            raise ValueError("Cover image URL must use HTTPS")

        object.__setattr__(self, "value", trimmed)
        object.__setattr__(self, "normalized", trimmed.replace("www.", ""))

    @property
    def image_format(self) -> str:
        """Image format from the path extension (e.g. "PNG"), or "UNKNOWN"."""
        path = urlsplit(self.normalized).path.lower()
        extension = path.rsplit(".", 1)[-1] if "." in path else ""
        return _FORMATS.get(extension, "UNKNOWN")

    def is_vector_image(self) -> bool:
        return self.image_format == "SVG"

    def is_raster_image(self) -> bool:
        return self.image_format in {"JPEG", "PNG", "GIF", "WEBP"}

    @property
    def domain(self) -> str | None:
        """Host part of the URL."""
        return urlsplit(self.normalized).hostname

    def is_from_trusted_domain(self) -> bool:
        """Check if the image is served by a well-known image host."""
        host = self.domain
        if host is None:
            return False
        return any(trusted in host.lower() for trusted in TRUSTED_IMAGE_HOSTS)

    def __str__(self) -> str:
        return self.normalized
