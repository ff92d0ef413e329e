"""Tracker matching and the cross-site block decision."""
import pytest

from navigatr.adblock.blocklist import DEFAULT_BLOCKLIST, build_blocklist
from navigatr.adblock.matcher import (
    extract_hostname,
    is_blocked_host,
    is_same_site,
    is_subdomain_or_same,
    matching_entry,
    normalize_host,
    should_block,
)

TRACKER = "https://stats.g.doubleclick.net/pixel.gif"


def test_extract_hostname_normalizes_valid_urls():
    assert extract_hostname("https://Sub.Example.com/path") == "sub.example.com"
    assert extract_hostname("https://example.com./") == "example.com"
    assert extract_hostname("http://[::1]:8080/") == "::1"


def test_extract_hostname_uses_punycode_for_unicode_hosts():
    assert extract_hostname("https://Bücher.Example/path") == "xn--bcher-kva.example"
    assert extract_hostname("bücher.example") == "xn--bcher-kva.example"


def test_unicode_request_host_matches_punycode_entry():
    blocklist = {"xn--bcher-kva.example"}
    assert should_block("https://cdn.bücher.example/x.js", "https://site.test", blocklist).blocked
    assert not should_block("https://cdn.bücher.example/x.js", "https://xn--bcher-kva.example", blocklist).blocked


def test_extract_hostname_retries_without_scheme():
    assert extract_hostname("example.com/path") == "example.com"


@pytest.mark.parametrize("value", ["not a valid url", "null", "", "   ", None, 42])
def test_extract_hostname_returns_none_for_invalid_input(value):
    assert extract_hostname(value) is None


def test_extract_hostname_has_no_host_for_opaque_urls():
    assert extract_hostname("data:text/plain,hi") is None
    assert extract_hostname("about:blank") is None


def test_normalize_host():
    assert normalize_host(" Example.COM. ") == "example.com"
    assert normalize_host("") is None
    assert normalize_host(None) is None


def test_is_subdomain_or_same():
    assert is_subdomain_or_same("a.b.example.com", "example.com")
    assert is_subdomain_or_same("example.com", "example.com")
    assert not is_subdomain_or_same("example.com", "tracker.com")
    assert not is_subdomain_or_same("badexample.com", "example.com")
    assert not is_subdomain_or_same("", "example.com")


def test_is_same_site_in_either_direction():
    assert is_same_site("cdn.example.com", "example.com")
    assert is_same_site("example.com", "cdn.example.com")
    assert not is_same_site("example.com", "analytics.vendor.com")


def test_is_blocked_host_matches_entries_and_subdomains():
    assert is_blocked_host("doubleclick.net", DEFAULT_BLOCKLIST)
    assert is_blocked_host("stats.g.doubleclick.net", DEFAULT_BLOCKLIST)
    assert is_blocked_host("DoubleClick.NET.", DEFAULT_BLOCKLIST)


def test_is_blocked_host_allows_other_hosts():
    assert not is_blocked_host("example.com", DEFAULT_BLOCKLIST)
    assert not is_blocked_host("cdn.example.org", DEFAULT_BLOCKLIST)
    assert not is_blocked_host("notdoubleclick.net", DEFAULT_BLOCKLIST)
    assert not is_blocked_host(None, DEFAULT_BLOCKLIST)


@pytest.mark.parametrize("domain", sorted(DEFAULT_BLOCKLIST))
def test_every_entry_blocks_itself_and_its_subdomains(domain):
    assert is_blocked_host(domain, DEFAULT_BLOCKLIST)
    assert is_blocked_host(f"x.{domain}", DEFAULT_BLOCKLIST)
    assert is_blocked_host(f"a.b-c.{domain}", DEFAULT_BLOCKLIST)


def test_matching_entry():
    assert matching_entry("www.google-analytics.com", DEFAULT_BLOCKLIST) == "google-analytics.com"
    assert matching_entry("example.com", DEFAULT_BLOCKLIST) is None


def test_build_blocklist_normalizes_extra_domains():
    blocklist = build_blocklist(["Ads.Example.org.", "", 5, ".foo.test"])
    assert "ads.example.org" in blocklist
    assert "foo.test" in blocklist
    assert DEFAULT_BLOCKLIST <= blocklist
    assert "" not in blocklist


def test_cross_site_tracker_is_blocked():
    verdict = should_block(TRACKER, "https://news.example.com", DEFAULT_BLOCKLIST)
    assert verdict.blocked
    assert "doubleclick.net" in verdict.reason


def test_untracked_host_is_allowed():
    verdict = should_block("https://cdn.example.org/app.js", "https://news.example.com", DEFAULT_BLOCKLIST)
    assert not verdict.blocked
    assert verdict.reason is None


@pytest.mark.parametrize(
    "request_url, initiator",
    [
        ("https://doubleclick.net/x", "https://www.doubleclick.net"),
        ("https://pixel.facebook.com/tr", "https://facebook.com/page"),
        ("https://connect.facebook.net/sdk.js", "https://facebook.net"),
    ],
)
def test_same_site_requests_are_allowed(request_url, initiator):
    assert not should_block(request_url, initiator, DEFAULT_BLOCKLIST).blocked


@pytest.mark.parametrize("initiator", [None, "", "null", "not a valid url"])
def test_unknown_initiator_fails_open(initiator):
    assert not should_block(TRACKER, initiator, DEFAULT_BLOCKLIST).blocked


def test_referrer_is_used_when_initiator_is_missing():
    verdict = should_block(TRACKER, None, DEFAULT_BLOCKLIST, referrer="https://news.example.com/a")
    assert verdict.blocked


def test_unparseable_request_fails_open():
    assert not should_block("not a valid url", "https://news.example.com", DEFAULT_BLOCKLIST).blocked
    assert not should_block(None, "https://news.example.com", DEFAULT_BLOCKLIST).blocked


def test_custom_blocklist():
    verdict = should_block("https://cdn.ads.test/x.js", "https://site.test", {"ads.test"})
    assert verdict.blocked
    assert not should_block(TRACKER, "https://site.test", {"ads.test"}).blocked


def test_verdict_is_recomputed_when_blocklist_changes():
    blocklist = set()
    assert not should_block("https://cdn.ads.test/x.js", "https://site.test", blocklist).blocked
    blocklist.add("ads.test")
    assert should_block("https://cdn.ads.test/x.js", "https://site.test", blocklist).blocked
