"""Redaction of sensitive header values in debug output."""

from collections.abc import Mapping

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
    "api-key",
    "x-auth-token",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(
    headers: Mapping[str, str], *, skip_redaction: bool = False
) -> dict[str, str]:
    """Return a copy of headers with sensitive values masked.

    The original mapping is never mutated. Header names are matched
    case-insensitively. Bearer and Basic schemes are kept so the output
    still shows which auth scheme was used.

    Args:
        headers: Header mapping to redact.
        skip_redaction: If True, returns an unredacted copy.

    Returns:
        A new dict with sensitive values replaced by "[REDACTED]".
    """
    if skip_redaction:
        return dict(headers)
    return {key: _redact_value(key, value) for key, value in headers.items()}


def _redact_value(key: str, value: str) -> str:
    if key.lower() not in REDACT_HEADERS:
        return value
    scheme, sep, _ = value.partition(" ")
    if sep and scheme.lower() in ("bearer", "basic"):
        return f"{scheme} {REDACTED_VALUE}"
    return REDACTED_VALUE
