"""Cookie header parsing and the attributes used for the session cookie."""

SESSION_COOKIE_NAME = "test-session-id"
COOKIE_PATH = "/"
LOCAL_DOMAIN = "localhost"


def parse_cookie_header(raw: str | None) -> dict[str, str]:
    """Parse a ``Cookie`` header into a name -> value mapping.

    Pairs are split on the first ``=`` so values may contain ``=``.
    Pairs with no ``=`` or an empty name are skipped. When a name appears
    more than once the first occurrence wins, which is also what the
    browser sends first (the most specific path).
    """
    cookies: dict[str, str] = {}
    if not raw:
        return cookies

    for part in raw.split(";"):
        name, sep, value = part.strip().partition("=")
        name = name.strip()
        if not sep or not name:
            continue
        cookies.setdefault(name, value.strip())
    return cookies


def get_session_cookie(raw: str | None) -> str | None:
    """Return the presented session credential, or None when absent or empty."""
    return parse_cookie_header(raw).get(SESSION_COOKIE_NAME) or None


def cookie_domain_for(host: str | None) -> str | None:
    """Pick the Domain attribute for the given Host header.

    Only ``localhost`` gets an explicit domain. Deployed hosts leave the
    attribute unset so the browser scopes the cookie to the exact host.
    """
    if not host:
        return None
    hostname = host.split(":")[0].strip().lower()
    return LOCAL_DOMAIN if hostname == LOCAL_DOMAIN else None
