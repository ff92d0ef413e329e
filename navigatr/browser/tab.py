# navigatr/browser/tab.py
from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtWebEngineCore import QWebEngineProfile
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtCore import QUrl, Signal

from .page import NavigationPage


class BrowserTab(QWidget):
    url_changed = Signal(str)
    title_changed = Signal(str)

    def __init__(self, url: str = "about:blank", profile: QWebEngineProfile | None = None):
        super().__init__()
        self._view = QWebEngineView()
        self._page = NavigationPage(profile or QWebEngineProfile.defaultProfile(), self._view)
        self._view.setPage(self._page)
        self._view.setUrl(QUrl(url))

        self._view.urlChanged.connect(self._on_url_changed)
        self._view.titleChanged.connect(self._on_title_changed)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._view)

    def navigate_to(self, url: str):
        """Navigate this browser tab to a new URL."""
        self._view.setUrl(QUrl(url))

    def _on_url_changed(self, qurl):
        self.url_changed.emit(qurl.toString())

    def _on_title_changed(self, title):
        self.title_changed.emit(title)

    def current_url(self) -> str:
        """Return the current URL as a string (for address bar updates)."""
        return self._view.url().toString()
