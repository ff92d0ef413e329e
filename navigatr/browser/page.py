# navigatr/browser/page.py
from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWebEngineCore import QWebEnginePage, QWebEngineSettings

from loguru import logger

from ..models.route import RoutingDecision
from ..navigation import NavigationRouter


def open_externally(url: QUrl) -> bool:
    logger.info(f"Handing {url.scheme()}: link to the system handler")
    opened = QDesktopServices.openUrl(url)
    if not opened:
        logger.warning(f"No handler accepted {url.toString()}")
    return opened


def apply_route(router: NavigationRouter, url: QUrl, current_origin: str) -> bool:
    """Route ``url``; external targets are handed off. False means cancel."""
    decision = router.route(url.toString(), current_origin)
    if decision is RoutingDecision.OPEN_EXTERNALLY:
        open_externally(url)
        return False
    return True


class NavigationPage(QWebEnginePage):
    """Page that runs every top-level navigation through the router."""

    def __init__(self, profile, parent=None, router: NavigationRouter | None = None):
        super().__init__(profile, parent)
        self.router = router or NavigationRouter()
        # unknown schemes must not reach the OS behind the router's back
        self.settings().setUnknownUrlSchemePolicy(
            QWebEngineSettings.UnknownUrlSchemePolicy.DisallowUnknownUrlSchemes
        )

    def current_origin(self) -> str:
        return self.url().toString()

    def acceptNavigationRequest(self, url: QUrl, nav_type, is_main_frame: bool) -> bool:
        if not is_main_frame:
            return True
        return apply_route(self.router, url, self.current_origin())

    def createWindow(self, window_type) -> QWebEnginePage:
        # window.open / target=_blank: route the popup's first navigation instead
        return _PopupPage(self)


class _PopupPage(QWebEnginePage):
    def __init__(self, opener: NavigationPage):
        super().__init__(opener.profile(), opener)
        self.opener = opener

    def acceptNavigationRequest(self, url: QUrl, nav_type, is_main_frame: bool) -> bool:
        if apply_route(self.opener.router, url, self.opener.current_origin()):
            self.opener.setUrl(url)
        self.deleteLater()
        return False
