"""
scoring.py
==========
Deterministic, side-effect-free accusation judging.

Kept apart from the exploration engine so it can be unit-tested on its own
and so the threshold rule lives in exactly one place (GameConfig).
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from config import GAME_CONFIG
from models import Verdict
from suspect_index import SuspectIndex

logger = logging.getLogger("detective_quest.scoring")


def supporting_clues(
    clues:   Iterable[str],
    index:   SuspectIndex,
    accused: str,
) -> List[str]:
    """
    Return the clues in `clues` whose linked suspect is exactly `accused`.

    Comparison is case-sensitive with no normalisation: "sr. avelar" does
    not match "Sr. Avelar". The result keeps the iteration order of `clues`
    (alphabetical when `clues` is a ClueSet).
    """
    return [clue for clue in clues if index.get(clue) == accused]


def tally(clues: Iterable[str], index: SuspectIndex, accused: str) -> int:
    """
    Count collected clues that point at `accused`.

    Each clue is looked up independently, so the count does not depend on
    the order in which `clues` is walked.

    Examples:
        >>> idx = SuspectIndex.from_mapping({"a": "X", "b": "Y", "c": "X"})
        >>> tally(["a", "b", "c"], idx, "X")
        2
        >>> tally(["a", "b", "c"], idx, "x")
        0
    """
    return len(supporting_clues(clues, index, accused))


def judge_accusation(
    clues:   Iterable[str],
    index:   SuspectIndex,
    accused: str,
) -> Verdict:
    """
    Judge an accusation against the collected clues.

    The accusation is sustained when at least
    GAME_CONFIG.accusation_threshold (2) collected clues point at the
    accused; otherwise it is insufficient.

    Args:
        clues:   Collected clue texts, normally the game's ClueSet.
        index:   The SuspectIndex loaded from the case data.
        accused: Suspect name as entered by the player (already trimmed).

    Returns:
        A Verdict with the tally and the clues that supported it.
    """
    threshold  = GAME_CONFIG.accusation_threshold
    supporting = supporting_clues(clues, index, accused)
    count      = len(supporting)
    verdict = Verdict(
        accused=accused,
        tally=count,
        threshold=threshold,
        sustained=count >= threshold,
        supporting_clues=supporting,
    )
    logger.info(
        "Accusation judged — accused=%r, tally=%d, threshold=%d, sustained=%s",
        accused, count, threshold, verdict.sustained,
    )
    return verdict
