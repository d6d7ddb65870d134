# linum/core/classifier.py
# Line classifier: assigns ordinals to raw lines according to a numbering policy

from __future__ import annotations

from typing import Iterable

from .policy import NumberingPolicy
from .types import NumberedDocument, NumberedLine
from .verbose import vlog_dev


# * Pair every line w/ its ordinal (or None) in source order
def classify(lines: Iterable[str], policy: NumberingPolicy) -> NumberedDocument:
    """Number ``lines`` with ``policy``; the counter starts at 1.

    A line accepted by ``should_increment`` shows the counter and advances it.
    A line accepted only by ``should_number`` shows the counter without
    advancing it. Any other line gets no ordinal.
    """
    numbered: NumberedDocument = []
    counter = 1

    for line in lines:
        if policy.should_increment(line):
            numbered.append(NumberedLine(counter, line))
            counter += 1
        elif policy.should_number(line):
            numbered.append(NumberedLine(counter, line))
        else:
            numbered.append(NumberedLine(None, line))

    vlog_dev(
        "CLASSIFY",
        f"{len(numbered)} lines, {counter - 1} counted",
        f"policy={policy.name}",
    )
    return numbered
