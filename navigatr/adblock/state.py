# navigatr/adblock/state.py
from typing import Iterable, Optional

from PySide6.QtCore import QObject, Signal

from ..models.verdict import BlockVerdict
from ..url_input import parse_scheme
from .blocklist import DEFAULT_BLOCKLIST
from .matcher import extract_hostname, should_block


class AdblockState(QObject):
    """Ad-block toggle and blocked-request counter shared by all tabs.

    The matcher never touches this object; the request interceptor asks
    ``check`` and this class does the bookkeeping.
    """
    stats_changed = Signal(int)
    enabled_changed = Signal(bool)

    def __init__(self, blocklist: Optional[Iterable[str]] = None, enabled: bool = True, parent=None):
        super().__init__(parent)
        self.blocklist = frozenset(blocklist) if blocklist is not None else DEFAULT_BLOCKLIST
        self._enabled = bool(enabled)
        self._blocked_total = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def blocked_total(self) -> int:
        return self._blocked_total

    def set_enabled(self, enabled: bool) -> None:
        enabled = bool(enabled)
        if enabled == self._enabled:
            return
        self._enabled = enabled
        self.enabled_changed.emit(enabled)

    def check(
        self,
        url: str,
        is_main_frame: bool = False,
        initiator: Optional[str] = None,
        referrer: Optional[str] = None,
        page_url: Optional[str] = None,
    ) -> BlockVerdict:
        if not self._enabled:
            return BlockVerdict.allow()
        if parse_scheme(url) not in ("http", "https"):
            return BlockVerdict.allow()
        if is_main_frame:
            return BlockVerdict.allow()

        fallback = next((v for v in (referrer, page_url) if extract_hostname(v)), None)
        verdict = should_block(url, initiator, self.blocklist, referrer=fallback)
        if verdict.blocked:
            self._blocked_total += 1
            self.stats_changed.emit(self._blocked_total)
        return verdict
