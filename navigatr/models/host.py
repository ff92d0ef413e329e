# navigatr/models/host.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class HostKind(str, Enum):
    LOCALHOST = "localhost"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    HOSTNAME = "hostname"


@dataclass(frozen=True)
class HostInfo:
    kind: HostKind
    octets: Optional[Tuple[int, int, int, int]] = None  # ipv4 only
    value: Optional[str] = None                           # ipv6 only, lowercase, no brackets
