# navigatr/adblock/matcher.py
"""Cross-site tracker matching.

A request is blocked when its host is, or is a subdomain of, a blocklist
entry and the page that issued it is not on the same site. Anything that
cannot be evaluated (unparseable URL, unknown initiator) is allowed.
"""
import re
import urllib.parse
from typing import Iterable, Optional

from loguru import logger

from ..models.verdict import BlockVerdict
from ..url_input import parse_scheme

# characters that can never appear in a parsed hostname
_FORBIDDEN_HOST_RE = re.compile(r"[\x00-\x20\x7f\"#%/<>?@\[\\\]^`{|}]")


def normalize_host(host) -> Optional[str]:
    if not isinstance(host, str):
        return None
    normalized = host.strip().lower()
    if normalized.endswith("."):
        normalized = normalized[:-1]
    return normalized or None


def _parse_hostname(url: str) -> Optional[str]:
    """Hostname of an absolute URL; raises ValueError if it does not parse."""
    if parse_scheme(url) is None:
        raise ValueError(f"not an absolute URL: {url!r}")
    parts = urllib.parse.urlsplit(url)
    parts.port  # raises ValueError for a malformed port
    hostname = parts.hostname or ""
    if _FORBIDDEN_HOST_RE.search(hostname):
        raise ValueError(f"invalid host in {url!r}")
    if ":" in hostname and "[" not in parts.netloc:
        raise ValueError(f"invalid host in {url!r}")
    if not hostname.isascii():
        # blocklists store the xn-- form; UnicodeError is a ValueError
        hostname = hostname.encode("idna").decode("ascii")
    return normalize_host(hostname)


def extract_hostname(url_or_origin) -> Optional[str]:
    """Normalized hostname of a URL or origin, retrying as ``http://`` + value."""
    if not isinstance(url_or_origin, str):
        return None
    value = url_or_origin.strip()
    if not value or value == "null":
        return None

    try:
        return _parse_hostname(value)
    except ValueError:
        pass
    try:
        return _parse_hostname(f"http://{value}")
    except ValueError:
        return None


def is_subdomain_or_same(host, candidate) -> bool:
    normalized_host = normalize_host(host)
    normalized_candidate = normalize_host(candidate)
    if not normalized_host or not normalized_candidate:
        return False
    return (
        normalized_host == normalized_candidate
        or normalized_host.endswith(f".{normalized_candidate}")
    )


def is_same_site(host_a, host_b) -> bool:
    return is_subdomain_or_same(host_a, host_b) or is_subdomain_or_same(host_b, host_a)


def matching_entry(host, blocklist: Iterable[str]) -> Optional[str]:
    """The blocklist entry ``host`` falls under, if any."""
    normalized = normalize_host(host)
    if not normalized:
        return None
    for domain in blocklist:
        if is_subdomain_or_same(normalized, domain):
            return domain
    return None


def is_blocked_host(host, blocklist: Iterable[str]) -> bool:
    return matching_entry(host, blocklist) is not None


def should_block(
    request_url,
    initiator_url,
    blocklist: Iterable[str],
    referrer=None,
) -> BlockVerdict:
    """Decide whether a sub-resource request is a cross-site tracking request.

    ``initiator_url`` is the origin or URL of the page that issued the
    request; ``referrer`` is consulted when the initiator yields no host.
    """
    request_host = extract_hostname(request_url)
    if not request_host:
        return BlockVerdict.allow()

    entry = matching_entry(request_host, blocklist)
    if entry is None:
        return BlockVerdict.allow()

    initiator_host = extract_hostname(initiator_url) or extract_hostname(referrer)
    if not initiator_host:
        return BlockVerdict.allow()

    if is_same_site(request_host, initiator_host):
        return BlockVerdict.allow()

    logger.debug(f"Blocking {request_host} ({entry}) requested by {initiator_host}")
    return BlockVerdict.block(f"{request_host} matches {entry}, requested by {initiator_host}")
