"""
models.py
=========
Shared data models for Detective Quest: Mansion Exploration.

Contains:
  - Room               : Dataclass node of the mansion's binary room tree.
  - Choice             : Navigation options offered at a room.
  - ExplorationStatus  : States of the exploration state machine.
  - ClueReport         : What happened when a room's clue was handled.
  - StepResult         : Outcome of entering a room or applying a choice.
  - RoomSpec           : Pydantic schema for the static mansion layout.
  - Verdict            : Pydantic schema for the accusation outcome.

Keeping these in one module guarantees a single source of truth for data
shapes used across room_tree.py, game_engine.py, scoring.py and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Room tree node
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Room:
    """
    One room of the mansion.

    Each room exclusively owns its children: the tree is built once at
    startup and never rewired afterwards.

    Attributes:
        name:  Unique, human-readable identifier, also used as display label.
        left:  Room reached by going left ("e"), if any.
        right: Room reached by going right ("d"), if any.
    """

    name:  str
    left:  Optional["Room"] = field(default=None, repr=False)
    right: Optional["Room"] = field(default=None, repr=False)

    @property
    def has_children(self) -> bool:
        return self.left is not None or self.right is not None

    def child(self, choice: "Choice") -> Optional["Room"]:
        """Return the room behind `choice`, or None if there is no door that way."""
        if choice is Choice.LEFT:
            return self.left
        if choice is Choice.RIGHT:
            return self.right
        return None


# ---------------------------------------------------------------------------
# State machine vocabulary
# ---------------------------------------------------------------------------

class Choice(str, Enum):
    """Navigation choices; values are the console tokens (lowercase)."""
    LEFT  = "e"
    RIGHT = "d"
    EXIT  = "s"


class ExplorationStatus(str, Enum):
    """`EXPLORING` waits for a choice; the other two are terminal."""
    EXPLORING = "exploring"
    EXITED    = "exited"
    DEAD_END  = "dead_end"


@dataclass
class ClueReport:
    """
    Result of the clue-handling step for one room visit.

    Attributes:
        room:              Room where the clue was found.
        clue:              Clue text.
        suspect:           Suspect linked to the clue, or None if unlinked.
        already_collected: True when the clue was already in the ClueSet and
                           nothing was inserted.
    """

    room:              str
    clue:              str
    suspect:           Optional[str] = None
    already_collected: bool = False


@dataclass
class StepResult:
    """
    Everything the CLI needs to render after one transition.

    `moved` is False for rejected choices; in that case `error` holds the
    message shown to the player and `clue` is always None.
    """

    room:    Room
    status:  ExplorationStatus
    moved:   bool = True
    clue:    Optional[ClueReport] = None
    error:   Optional[str] = None

    @property
    def finished(self) -> bool:
        return self.status is not ExplorationStatus.EXPLORING


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------

class RoomSpec(BaseModel):
    """
    Validated description of a (sub)tree of the mansion layout.

    The static layout in case_data.py is a nested dict; parsing it through
    this model guarantees every node has a non-empty name and that children
    are themselves well-formed before any Room is allocated.
    """

    name:  str = Field(min_length=1)
    left:  Optional["RoomSpec"] = None
    right: Optional["RoomSpec"] = None


RoomSpec.model_rebuild()


class Verdict(BaseModel):
    """
    Outcome of an accusation.

    Fields:
        accused:          Name exactly as typed by the player (after trimming).
        tally:            Collected clues that resolve to the accused.
        threshold:        Tally required for the accusation to be sustained.
        sustained:        True when tally >= threshold.
        supporting_clues: The clues counted in `tally`, alphabetical.
    """

    accused:          str
    tally:            int = Field(ge=0)
    threshold:        int
    sustained:        bool
    supporting_clues: List[str] = Field(default_factory=list)
