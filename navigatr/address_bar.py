# navigatr/address_bar.py
from PySide6.QtWidgets import QLineEdit

from .browser.tab import BrowserTab
from .url_input import InputResolver


class AddressBarController:
    def __init__(self, resolver: InputResolver, tab: BrowserTab):
        self.resolver = resolver
        self.tab = tab
        self.line_edit: QLineEdit | None = None
        self._editing = False

    def bind(self, line_edit: QLineEdit) -> None:
        self.line_edit = line_edit
        self.line_edit.returnPressed.connect(self._on_submit)
        self.line_edit.textEdited.connect(self._on_text_edited)
        self.line_edit.editingFinished.connect(self._on_editing_finished)
        self.tab.url_changed.connect(self._on_tab_url_changed)

    def _on_text_edited(self, _text: str) -> None:
        self._editing = True

    def _on_editing_finished(self) -> None:
        self._editing = False

    def _on_tab_url_changed(self, url: str) -> None:
        # don't clobber what the user is typing
        if self.line_edit and not self._editing:
            self.line_edit.setText(url)

    def _on_submit(self) -> None:
        if not self.line_edit:
            return
        self._editing = False
        target = self.resolver.resolve(self.line_edit.text())
        if target is None:
            return
        # the page routes the load; mailto: and friends never reach the view
        self.tab.navigate_to(target.url)
