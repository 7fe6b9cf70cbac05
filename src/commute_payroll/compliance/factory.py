from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ContinuousDaysMode
from ..core.exceptions import ConfigurationError
from .strategies.base import ContinuousDaysStrategy
from .strategies.consecutive_run_strategy import ConsecutiveRunStrategy
from .strategies.record_count_strategy import RecordCountStrategy


@dataclass
class ContinuousDaysStrategyFactory:
    """Factory Pattern: choose the continuous-days counting rule from config."""

    def for_mode(self, mode: ContinuousDaysMode) -> ContinuousDaysStrategy:
        if mode == ContinuousDaysMode.RECORD_COUNT:
            return RecordCountStrategy()
        if mode == ContinuousDaysMode.CONSECUTIVE_RUN:
            return ConsecutiveRunStrategy()
        raise ConfigurationError(f"unsupported continuous days mode {mode!r}")
