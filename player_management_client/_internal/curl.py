"""curl command reconstruction for debug output."""

import json
import shlex

from player_management_client._internal.builder import RequestSpec
from player_management_client._internal.redaction import redact_headers


def format_curl_command(
    spec: RequestSpec,
    *,
    basic_user: str | None = None,
    skip_redaction: bool = False,
) -> str:
    """Render a request as an equivalent curl command.

    Args:
        spec: The request about to be sent.
        basic_user: Basic auth user name, rendered as ``-u user`` so curl
            prompts for the password.
        skip_redaction: If True, header secrets are printed as is.

    Returns:
        A single-line, shell-quoted curl command.
    """
    parts = ["curl"]
    if not spec.verify:
        parts.append("-k")
    parts += ["-X", spec.method]
    for key, value in redact_headers(spec.headers, skip_redaction=skip_redaction).items():
        parts += ["-H", shlex.quote(f"{key}: {value}")]
    if basic_user is not None:
        parts += ["-u", shlex.quote(basic_user)]
    if spec.body is not None:
        data = json.dumps(spec.body, separators=(",", ":"), default=str)
        parts += ["--data", shlex.quote(data)]
    parts.append(shlex.quote(spec.url))
    return " ".join(parts)
