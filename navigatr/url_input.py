# navigatr/url_input.py
"""Turn whatever the user typed into the address bar into something to load.

Order matters: ``host:port`` shorthand is checked before generic scheme
detection, since ``example.com:8080`` is also a syntactically valid URI
with the scheme ``example.com``. Explicit URIs are returned untouched.
"""
import re
import urllib.parse
from typing import Optional

from .hosts import classify_host, is_private_host
from .models.host import HostInfo, HostKind
from .models.target import ResolvedTarget

DEFAULT_SEARCH_URL = "https://duckduckgo.com/?q="

URI_SCHEME_RE = re.compile(r"^(?P<scheme>[a-zA-Z][a-zA-Z0-9+.-]*):")
URI_SCHEME_WITH_AUTHORITY_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")
HOST_PORT_RE = re.compile(
    r"^(?P<host>\[[^\]\s]+\]|[^:/?#\s]+):(?P<port>[0-9]+)(?P<suffix>[/?#].*)?\Z",
    re.DOTALL,
)
HOST_RE = re.compile(
    r"^(?P<host>\[[^\]\s]+\]|[^:/?#\s]+)(?P<suffix>[/?#].*)?\Z",
    re.DOTALL,
)

# characters encodeURIComponent leaves alone, besides alphanumerics and "_.-~"
_QUERY_SAFE = "!*'()"


def parse_scheme(value: str) -> Optional[str]:
    """Lowercased scheme of ``value``, or None if it does not start with one."""
    if not isinstance(value, str):
        return None
    match = URI_SCHEME_RE.match(value)
    if not match:
        return None
    return match.group("scheme").lower()


def has_authority(value: str) -> bool:
    return isinstance(value, str) and bool(URI_SCHEME_WITH_AUTHORITY_RE.match(value))


def is_explicit_uri(value: str) -> bool:
    return has_authority(value) or parse_scheme(value) is not None


def _has_whitespace(value: str) -> bool:
    return any(ch.isspace() for ch in value)


def parse_host_port_shorthand(value: str) -> Optional[HostInfo]:
    if _has_whitespace(value):
        return None
    match = HOST_PORT_RE.match(value)
    if not match:
        return None
    return classify_host(match.group("host"))


def parse_host_target(value: str) -> Optional[HostInfo]:
    if _has_whitespace(value):
        return None
    match = HOST_RE.match(value)
    if not match:
        return None
    return classify_host(match.group("host"))


def search_url_for(text: str, search_url: str = DEFAULT_SEARCH_URL) -> str:
    encoded = urllib.parse.quote(text, safe=_QUERY_SAFE, errors="replace")
    return f"{search_url}{encoded}"


class InputResolver:
    def __init__(self, search_url: Optional[str] = None):
        self.search_url = search_url or DEFAULT_SEARCH_URL

    def resolve(self, raw) -> Optional[ResolvedTarget]:
        """Resolve address bar text; None means there is nothing to load."""
        value = raw.strip() if isinstance(raw, str) else ""
        if not value:
            return None

        shorthand = parse_host_port_shorthand(value)
        if shorthand:
            scheme = "http://" if is_private_host(shorthand) else "https://"
            return ResolvedTarget(kind="url", url=f"{scheme}{value}")

        if is_explicit_uri(value):
            return ResolvedTarget(kind="url", url=value)

        host = parse_host_target(value)
        if is_private_host(host):
            return ResolvedTarget(kind="url", url=f"http://{value}")
        if host and host.kind is not HostKind.LOCALHOST:
            return ResolvedTarget(kind="url", url=f"https://{value}")

        return ResolvedTarget(kind="search", url=search_url_for(value, self.search_url), text=value)

    def normalize(self, raw) -> Optional[str]:
        target = self.resolve(raw)
        return target.url if target else None


def resolve(raw, search_url: Optional[str] = None) -> Optional[ResolvedTarget]:
    return InputResolver(search_url).resolve(raw)
