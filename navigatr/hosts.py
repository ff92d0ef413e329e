# navigatr/hosts.py
"""Host token classification.

A host token is the part of typed input before any port or path, e.g.
``localhost``, ``10.0.0.5``, ``[::1]`` or ``example.com``. Classification
never raises: anything that is not one of the recognised shapes yields
``None`` and the caller treats it as "not a navigable host".
"""
import re
from typing import Optional, Tuple

from .models.host import HostInfo, HostKind

_DECIMAL_RE = re.compile(r"^[0-9]+$")
_LABEL_RE = re.compile(r"^[a-z0-9-]+$", re.IGNORECASE | re.ASCII)
_IPV6_CHARS_RE = re.compile(r"^[0-9a-f:.%]+$", re.IGNORECASE | re.ASCII)
_HEX_PREFIX_RE = re.compile(r"^[0-9a-f]+")

MAX_HOSTNAME_LENGTH = 253
MAX_LABEL_LENGTH = 63


def parse_ipv4(host: str) -> Optional[Tuple[int, int, int, int]]:
    parts = host.split(".")
    if len(parts) != 4:
        return None
    octets = []
    for part in parts:
        if not _DECIMAL_RE.match(part):
            return None
        octet = int(part)
        if octet > 255:
            return None
        octets.append(octet)
    return tuple(octets)


def is_hostname_with_dot(host: str) -> bool:
    if "." not in host or len(host) > MAX_HOSTNAME_LENGTH:
        return False
    for label in host.split("."):
        if not label or len(label) > MAX_LABEL_LENGTH:
            return False
        if not _LABEL_RE.match(label):
            return False
        if label.startswith("-") or label.endswith("-"):
            return False
    return True


def is_bracketed_ipv6(host: str) -> bool:
    if len(host) < 2 or not host.startswith("[") or not host.endswith("]"):
        return False
    inner = host[1:-1]
    if not inner or ":" not in inner:
        return False
    return bool(_IPV6_CHARS_RE.match(inner))


def classify_host(token) -> Optional[HostInfo]:
    """Return the kind of host ``token`` names, or None if unrecognised."""
    if not isinstance(token, str) or not token:
        return None
    if any(ch.isspace() for ch in token):
        return None

    lower = token.lower()
    if lower == "localhost":
        return HostInfo(HostKind.LOCALHOST)

    octets = parse_ipv4(lower)
    if octets:
        return HostInfo(HostKind.IPV4, octets=octets)

    if is_bracketed_ipv6(token):
        return HostInfo(HostKind.IPV6, value=token[1:-1].lower())

    if is_hostname_with_dot(lower):
        return HostInfo(HostKind.HOSTNAME)

    return None


def _is_private_ipv4(octets: Tuple[int, int, int, int]) -> bool:
    a, b = octets[0], octets[1]
    if a in (0, 10, 127):
        return True
    if a == 172 and 16 <= b <= 31:
        return True
    if a == 192 and b == 168:
        return True
    # link-local
    if a == 169 and b == 254:
        return True
    return False


def _is_private_ipv6(value: str) -> bool:
    address = value.split("%", 1)[0].lower()
    if address in ("::", "::1"):
        return True

    first = next((segment for segment in address.split(":") if segment), "0")
    match = _HEX_PREFIX_RE.match(first)
    if not match:
        return False
    hextet = int(match.group(0), 16)

    if (hextet & 0xFE00) == 0xFC00:  # fc00::/7 unique-local
        return True
    if (hextet & 0xFFC0) == 0xFE80:  # fe80::/10 link-local
        return True
    return False


def is_private_host(info: Optional[HostInfo]) -> bool:
    """True for loopback, RFC1918, link-local and unique-local hosts."""
    if info is None:
        return False
    if info.kind is HostKind.LOCALHOST:
        return True
    if info.kind is HostKind.IPV4:
        return _is_private_ipv4(info.octets)
    if info.kind is HostKind.IPV6:
        return _is_private_ipv6(info.value)
    return False
