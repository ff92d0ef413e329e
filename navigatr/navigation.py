# navigatr/navigation.py
"""Decide where a navigation goes: the current view, or the OS.

Only ``http``, ``https``, ``about``, ``blob`` and ``data`` are rendered by
the view itself. Authority-style URLs with any other scheme (``ftp://``,
``zoommtg://``...) and the ``mailto``/``tel``/``sms`` family are handed to
the operating system. Everything else stays in the view, where an unknown
scheme simply fails to load instead of launching an arbitrary handler.
"""
import urllib.parse
from typing import Optional

from loguru import logger

from .models.route import RoutingDecision
from .url_input import has_authority, parse_scheme

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}


def origin_of(url) -> Optional[str]:
    """Serialized origin (``scheme://host[:port]``) of ``url``.

    Returns None for opaque origins: opaque schemes, unparseable input and
    blob URLs wrapping anything but an http(s) URL.
    """
    scheme = parse_scheme(url)
    if scheme is None:
        return None
    if scheme == "blob":
        inner = url.strip()[len("blob:"):]
        if parse_scheme(inner) not in ("http", "https"):
            return None
        return origin_of(inner)
    if scheme not in _DEFAULT_PORTS:
        return None

    try:
        parts = urllib.parse.urlsplit(url.strip())
        port = parts.port
    except ValueError:
        return None
    host = parts.hostname
    if not host or any(ch.isspace() for ch in host):
        return None
    if ":" in host:
        host = f"[{host}]"
    if port is None or port == _DEFAULT_PORTS[scheme]:
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


class NavigationRouter:
    INTERNAL_SCHEMES = {"http", "https", "about", "blob", "data"}
    IN_PAGE_SCHEMES = {"about", "data"}
    EXTERNAL_SCHEMES = {"mailto", "tel", "sms"}

    def route(self, target_url, current_view_origin=None) -> RoutingDecision:
        scheme = parse_scheme(target_url)
        if scheme is None:
            return RoutingDecision.LOAD_IN_VIEW

        if scheme in self.INTERNAL_SCHEMES:
            if self._allowed_in_page(scheme, target_url, current_view_origin):
                return RoutingDecision.ALLOW_IN_PAGE_SCHEME
            return RoutingDecision.LOAD_IN_VIEW

        if has_authority(target_url) or scheme in self.EXTERNAL_SCHEMES:
            logger.debug(f"Routing {scheme}: navigation to the OS")
            return RoutingDecision.OPEN_EXTERNALLY

        return RoutingDecision.LOAD_IN_VIEW

    def _allowed_in_page(self, scheme: str, target_url: str, current_view_origin) -> bool:
        if scheme in self.IN_PAGE_SCHEMES:
            return True
        if scheme == "blob":
            target_origin = origin_of(target_url)
            view_origin = origin_of(current_view_origin)
            return target_origin is not None and target_origin == view_origin
        return False


def route(target_url, current_view_origin=None) -> RoutingDecision:
    return NavigationRouter().route(target_url, current_view_origin)
