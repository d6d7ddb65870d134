# linum/cli/logic.py
# CLI-layer argument resolution: flags + settings -> numbering options

from __future__ import annotations

from ..config.settings import LinumSettings
from ..core.constants import PadMode
from ..core.pipeline import NumberingOptions
from ..core.policy import policy_for


# * Resolve CLI flags against settings defaults; a flag can only switch a behaviour on
class ArgResolver:

    def __init__(self, settings: LinumSettings):
        self.settings = settings

    def resolve_options(
        self,
        *,
        skip_empty: bool = False,
        left_align: bool = False,
        reverse: bool = False,
    ) -> NumberingOptions:
        pad_mode = PadMode.PAD_RIGHT if left_align else self.settings.pad_mode
        return NumberingOptions(
            policy=policy_for(skip_empty or self.settings.skip_empty),
            pad_mode=pad_mode,
            reverse=reverse or self.settings.reverse,
            fit_numbers=self.settings.fit_numbers,
        )
