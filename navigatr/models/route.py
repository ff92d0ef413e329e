# navigatr/models/route.py
from enum import Enum


class RoutingDecision(str, Enum):
    LOAD_IN_VIEW = "load_in_view"
    OPEN_EXTERNALLY = "open_externally"
    ALLOW_IN_PAGE_SCHEME = "allow_in_page_scheme"
