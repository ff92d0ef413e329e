# navigatr/models/verdict.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BlockVerdict:
    blocked: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> "BlockVerdict":
        return cls(blocked=False)

    @classmethod
    def block(cls, reason: str) -> "BlockVerdict":
        return cls(blocked=True, reason=reason)
