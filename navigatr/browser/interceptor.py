# navigatr/browser/interceptor.py
from PySide6.QtWebEngineCore import QWebEngineUrlRequestInfo, QWebEngineUrlRequestInterceptor

from ..adblock.state import AdblockState


class TrackerInterceptor(QWebEngineUrlRequestInterceptor):
    """Blocks cross-site tracker requests for every page of a profile."""

    def __init__(self, state: AdblockState, parent=None):
        super().__init__(parent)
        self.state = state

    def interceptRequest(self, info: QWebEngineUrlRequestInfo) -> None:
        is_main_frame = (
            info.resourceType() == QWebEngineUrlRequestInfo.ResourceType.ResourceTypeMainFrame
        )
        verdict = self.state.check(
            info.requestUrl().toString(),
            is_main_frame=is_main_frame,
            initiator=info.initiator().toString(),
            page_url=info.firstPartyUrl().toString(),
        )
        if verdict.blocked:
            info.block(True)
