"""Bearer Credential — pure extraction of the token from an Authorization header.

Invariants:
    - Returns the token only for "<scheme> <token>" with scheme == "bearer" (case-insensitive)
    - Never verifies the token; identity resolution happens in the shell
    - No side effects
"""


def extract_bearer_token(header: str | None) -> str | None:
    """Return the bearer token from an Authorization header value, or None."""
    if not header:
        return None
    parts = header.split()
    if len(parts) != 2:
        return None
    scheme, token = parts
    if scheme.lower() != "bearer":
        return None
    return token
