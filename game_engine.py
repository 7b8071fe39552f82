"""
game_engine.py
==============
Exploration engine for Detective Quest: Mansion Exploration.

Contains:
  ExplorationEngine — the state machine that walks the room tree, collects
                      each room's clue into the ClueSet and reports the
                      suspect linked to it through the SuspectIndex.

The engine never reads from or writes to the console. It consumes Choice
values and returns StepResult objects; cli.py is a thin adapter that turns
keystrokes into choices and results into text.

Public API summary:
    engine = ExplorationEngine.for_mansion()
    engine.start()                 → StepResult (enters the root room)
    engine.step(choice)            → StepResult
    engine.collect_clue(room_name) → ClueReport | None
    engine.available_choices()     → list of Choice
    engine.accuse(name)            → Verdict
    engine.close()                 → None

Logging
-------
The logger name for this module is ``detective_quest.game_engine``.
Configure level and destination once at the entry point (cli.py).
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

from case_data import CLUE_SUSPECTS, ROOM_CLUES
from clue_set import ClueSet
from config import GAME_CONFIG
from models import ClueReport, Choice, ExplorationStatus, Room, StepResult, Verdict
from room_tree import build_mansion, iter_rooms, release_tree
from scoring import judge_accusation
from suspect_index import SuspectIndex

logger = logging.getLogger("detective_quest.game_engine")


class ExplorationEngine:
    """
    Room-by-room exploration state machine.

    States are "at room R" (status EXPLORING) plus the terminal EXITED and
    DEAD_END. Each transition depends only on the current room and the
    player's choice.

    Attributes:
        root:          First room of the mansion.
        room_clues:    Static room name -> clue text table.
        clues:         ClueSet of collected clues; mutated only here.
        suspect_index: Clue -> suspect map; only queried here.
        current_room:  Room the player is standing in.
        status:        Current ExplorationStatus.
        visited:       Names of rooms entered, in order.
    """

    def __init__(
        self,
        root:          Room,
        room_clues:    Mapping[str, str],
        suspect_index: SuspectIndex,
        clues:         Optional[ClueSet] = None,
    ) -> None:
        self.root: Optional[Room] = root
        self.room_clues: Dict[str, str] = dict(room_clues)
        self.suspect_index = suspect_index
        self.clues         = clues if clues is not None else ClueSet()
        self.current_room  = root
        self.status        = ExplorationStatus.EXPLORING
        self.visited: List[str] = []
        self._started      = False
        self._closed       = False

        unknown = set(self.room_clues) - {room.name for room in iter_rooms(root)}
        if unknown:
            logger.warning("Clue table names rooms not in the mansion: %s", sorted(unknown))

    @classmethod
    def for_mansion(cls) -> "ExplorationEngine":
        """
        Build the reference mansion, its clue tables and a fresh engine.

        Raises:
            ValueError: if the layout's root is not GAME_CONFIG.start_room.
        """
        root = build_mansion()
        if root.name != GAME_CONFIG.start_room:
            raise ValueError(
                f"Mansion layout starts at {root.name!r}, "
                f"expected start room {GAME_CONFIG.start_room!r}"
            )
        index = SuspectIndex.from_mapping(CLUE_SUSPECTS, GAME_CONFIG.bucket_count)
        logger.info(
            "ExplorationEngine initialised — start_room=%s, clue_rooms=%d",
            root.name,
            len(ROOM_CLUES),
        )
        return cls(root, ROOM_CLUES, index)

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    @property
    def is_finished(self) -> bool:
        return self.status is not ExplorationStatus.EXPLORING

    def start(self) -> StepResult:
        """Enter the root room. Must be called once before step()."""
        if self._started:
            raise RuntimeError("Exploration already started.")
        self._started = True
        return self._enter(self.root)

    def available_choices(self) -> List[Choice]:
        """Choices valid in the current room: existing directions, then exit."""
        choices = []
        if self.current_room.left is not None:
            choices.append(Choice.LEFT)
        if self.current_room.right is not None:
            choices.append(Choice.RIGHT)
        choices.append(Choice.EXIT)
        return choices

    def step(self, choice: Optional[Choice]) -> StepResult:
        """
        Apply one navigation choice.

        A None choice (unrecognised input) or a direction with no room
        behind it is rejected: the result has moved=False and an error
        message, and neither the current room nor the ClueSet changes.

        Raises:
            RuntimeError: if called before start() or after a terminal state.
        """
        if not self._started:
            raise RuntimeError("Exploration not started; call start() first.")
        if self.is_finished:
            raise RuntimeError(f"Exploration already finished ({self.status.value}).")

        if choice is None:
            return self._reject("Opção inválida!")

        if choice is Choice.EXIT:
            self.status = ExplorationStatus.EXITED
            logger.info("Player left the exploration at %s.", self.current_room.name)
            return StepResult(room=self.current_room, status=self.status, moved=False)

        target = self.current_room.child(choice)
        if target is None:
            side = "esquerda" if choice is Choice.LEFT else "direita"
            return self._reject(f"Não existe sala à {side}!")

        logger.debug("Moving %s: %s -> %s", choice.name, self.current_room.name, target.name)
        return self._enter(target)

    def _reject(self, message: str) -> StepResult:
        logger.warning("Rejected move at %s: %s", self.current_room.name, message)
        return StepResult(
            room=self.current_room, status=self.status, moved=False, error=message
        )

    def _enter(self, room: Room) -> StepResult:
        self.current_room = room
        self.visited.append(room.name)
        report = self.collect_clue(room.name)

        if not room.has_children:
            self.status = ExplorationStatus.DEAD_END
            logger.info("Dead end reached at %s.", room.name)

        return StepResult(room=room, status=self.status, clue=report)

    # ------------------------------------------------------------------
    # Clue handling
    # ------------------------------------------------------------------

    def collect_clue(self, room_name: str) -> Optional[ClueReport]:
        """
        Handle the clue of `room_name`, if it has one.

        A new clue is inserted into the ClueSet and reported together with
        its linked suspect (None when the index has no link). A clue that is
        already collected is reported as such and nothing is inserted.

        Returns:
            A ClueReport, or None if the room holds no clue.
        """
        clue = self.room_clues.get(room_name)
        if clue is None:
            return None

        if self.clues.contains(clue):
            logger.debug("Clue %r in %s already collected.", clue, room_name)
            return ClueReport(room=room_name, clue=clue, already_collected=True)

        self.clues.insert(clue)
        suspect = self.suspect_index.get(clue)
        logger.info(
            "Clue collected in %s: %r -> %s (total=%d)",
            room_name, clue, suspect or "no suspect", len(self.clues),
        )
        return ClueReport(room=room_name, clue=clue, suspect=suspect)

    def collected_clues(self) -> List[str]:
        return self.clues.in_order()

    # ------------------------------------------------------------------
    # Accusation and teardown
    # ------------------------------------------------------------------

    def accuse(self, accused: str) -> Verdict:
        """Judge an accusation of `accused` against the clues collected so far."""
        return judge_accusation(self.clues, self.suspect_index, accused)

    def close(self) -> None:
        """
        Release the room tree, the collected clues and the suspect index.

        Each structure is torn down children-first, every node exactly once.
        Closing twice is a no-op. The engine must not be used afterwards.
        """
        if self._closed:
            return
        self._closed = True
        rooms   = release_tree(self.root)
        self.root = None
        clues   = self.clues.clear()
        entries = self.suspect_index.clear()
        logger.info(
            "Engine closed — released rooms=%d, clues=%d, index_entries=%d",
            rooms, clues, entries,
        )
