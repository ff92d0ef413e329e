# navigatr/models/target.py
from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedTarget:
    """What the address bar should load for a piece of typed text.

    ``url`` is always the string to hand to the view. For a search, ``text``
    keeps the original (trimmed) query.
    """
    kind: str  # 'url' | 'search'
    url: str
    text: str = ""

    @property
    def is_search(self) -> bool:
        return self.kind == "search"
