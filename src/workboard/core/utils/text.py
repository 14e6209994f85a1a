"""Text processing utilities."""

from workboard.core.constants import FALLBACK_SLUG, MAX_SLUG_LENGTH


def generate_slug(name: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Generate a URL-safe slug from a name.

    Converts the input string to a URL-friendly slug by:
    - Trimming and lowercasing
    - Joining the space-separated words with single hyphens
    - Dropping every character that is not a letter, digit or hyphen
    - Truncating to max_length

    A name made only of symbols yields ``FALLBACK_SLUG``.

    Args:
        name: The input string to slugify
        max_length: Maximum length of output slug (default 120)

    Returns:
        URL-safe lowercase slug

    Examples:
        >>> generate_slug("  Acme   Rockets ")
        'acme-rockets'
        >>> generate_slug("Hello! World@2024")
        'hello-world2024'
    """
    words = [word for word in name.strip().lower().split(" ") if word]
    slug = "".join(ch for ch in "-".join(words) if ch.isalnum() or ch == "-")
    return slug[:max_length] or FALLBACK_SLUG


def normalize_email(email: str) -> str:
    """Normalize an email address for storage and lookup."""
    return email.strip().lower()
