"""URL building utilities."""


def build_short_url(record_id: str, base_url: str) -> str:
    """Build the public URL of a redirect.

    Args:
        record_id: The short identifier
        base_url: Base URL (e.g., https://example.com or https://example.com/s)

    Returns:
        Complete short URL
    """
    return f"{base_url.rstrip('/')}/{record_id}"
