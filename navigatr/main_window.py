# navigatr/main_window.py
from PySide6.QtWidgets import (
    QMainWindow, QVBoxLayout, QWidget,
    QLineEdit, QToolBar, QCheckBox, QLabel
)
from PySide6.QtWebEngineCore import QWebEngineProfile

from .adblock.blocklist import build_blocklist
from .adblock.state import AdblockState
from .address_bar import AddressBarController
from .browser.interceptor import TrackerInterceptor
from .browser.tab import BrowserTab
from .settings import set_adblock_enabled
from .url_input import InputResolver


class MainWindow(QMainWindow):
    def __init__(self, settings: dict, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Navigatr")
        self.resize(1280, 800)

        # Ad-block state + interceptor for the shared profile
        self.adblock = AdblockState(
            build_blocklist(settings["adblock"]["extra_domains"]),
            enabled=settings["adblock"]["enabled"],
            parent=self,
        )
        profile = QWebEngineProfile.defaultProfile()
        self.interceptor = TrackerInterceptor(self.adblock, parent=self)
        profile.setUrlRequestInterceptor(self.interceptor)

        self.tab = BrowserTab(settings["home"]["url"], profile=profile)
        self.tab.title_changed.connect(self._on_title_changed)

        # Address bar
        self.address_bar = QLineEdit()
        self.address_controller = AddressBarController(
            InputResolver(settings["search"]["url"]), self.tab
        )
        self.address_controller.bind(self.address_bar)

        self.adblock_toggle = QCheckBox("Block trackers")
        self.adblock_toggle.setChecked(self.adblock.enabled)
        self.adblock_toggle.toggled.connect(self._on_adblock_toggled)
        self.blocked_count = QLabel()
        self._on_stats_changed(self.adblock.blocked_total)
        self.adblock.stats_changed.connect(self._on_stats_changed)

        toolbar = QToolBar()
        toolbar.addWidget(self.address_bar)
        toolbar.addWidget(self.adblock_toggle)
        toolbar.addWidget(self.blocked_count)
        self.addToolBar(toolbar)

        central = QWidget()
        layout = QVBoxLayout()
        layout.addWidget(self.tab)
        central.setLayout(layout)
        self.setCentralWidget(central)

    def _on_adblock_toggled(self, checked: bool) -> None:
        self.adblock.set_enabled(checked)
        set_adblock_enabled(checked)

    def _on_stats_changed(self, total: int) -> None:
        self.blocked_count.setText(f"Blocked: {total}")

    def _on_title_changed(self, title: str) -> None:
        self.setWindowTitle(f"{title} - Navigatr" if title else "Navigatr")
