"""Header parsing utilities."""

from typing import Mapping, Optional


def build_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Build base URL from headers or fallback.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host (+ X-Forwarded-Prefix)
    2. Request scheme + host
    3. Fallback base URL from config

    Args:
        headers: Request headers
        fallback_base_url: Configured server hostname
        request_scheme: Request scheme (http/https)
        request_host: Request host

    Returns:
        Base URL without trailing slash (e.g., https://example.com)
    """
    headers_lower = {k.lower(): v for k, v in headers.items()}
    proto = headers_lower.get("x-forwarded-proto")
    host = headers_lower.get("x-forwarded-host")

    if proto and host:
        prefix = (headers_lower.get("x-forwarded-prefix") or "").strip().strip("/")
        base = f"{proto}://{host}"
        return f"{base}/{prefix}" if prefix else base

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")
