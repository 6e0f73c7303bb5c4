from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class ProgressConfig:
    desc: str = "Combinations"
    unit: str = "comb"
    progress: bool = True
    verbose: bool = False
    limit: Optional[int] = None  # None -> all combinations
    log_every: int = 0  # 0 -> no intermediate [Comb] lines

    def validate(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise ValueError("limit must be >= 0 or None.")
        if self.log_every < 0:
            raise ValueError("log_every must be >= 0.")
