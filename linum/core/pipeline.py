# linum/core/pipeline.py
# Classify -> render -> (optional) reverse, computed once per invocation

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .classifier import classify
from .constants import PadMode
from .formatter import render
from .policy import NUMBER_ALL, NumberingPolicy
from .verbose import vlog_stage


# * Resolved choices for one numbering run
@dataclass(frozen=True)
class NumberingOptions:
    policy: NumberingPolicy = NUMBER_ALL
    pad_mode: PadMode = PadMode.PAD_LEFT
    reverse: bool = False
    fit_numbers: bool = False


# * Produce the printable lines for a whole file
def number_lines(lines: Sequence[str], options: NumberingOptions) -> list[str]:
    vlog_stage("Classify", f"{len(lines)} lines w/ '{options.policy.name}' policy")
    numbered = classify(lines, options.policy)

    vlog_stage("Render", options.pad_mode.value)
    rendered = render(options.pad_mode, numbered, fit_numbers=options.fit_numbers)

    if options.reverse:
        # ordinals stay as computed in forward order
        vlog_stage("Reverse")
        rendered.reverse()
    return rendered
