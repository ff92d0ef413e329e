# navigatr/adblock/blocklist.py
from typing import FrozenSet, Iterable

BLOCKED_DOMAINS = (
    "doubleclick.net",
    "googlesyndication.com",
    "googleadservices.com",
    "adservice.google.com",
    "adservice.google.co.uk",
    "ads.yahoo.com",
    "adnxs.com",
    "criteo.com",
    "taboola.com",
    "outbrain.com",
    "scorecardresearch.com",
    "quantserve.com",
    "zedo.com",
    "rubiconproject.com",
    "pubmatic.com",
    "openx.net",
    "moatads.com",
    "adsrvr.org",
    "tracker.example.com",
    "googletagmanager.com",
    "google-analytics.com",
    "analytics.google.com",
    "facebook.net",
    "connect.facebook.net",
    "pixel.facebook.com",
)

DEFAULT_BLOCKLIST: FrozenSet[str] = frozenset(BLOCKED_DOMAINS)


def build_blocklist(extra: Iterable[str] = ()) -> FrozenSet[str]:
    """Default domains plus user supplied ones, lowercased, no leading/trailing dot."""
    domains = set(DEFAULT_BLOCKLIST)
    for entry in extra or ():
        if not isinstance(entry, str):
            continue
        domain = entry.strip().lower().strip(".")
        if domain:
            domains.add(domain)
    return frozenset(domains)
