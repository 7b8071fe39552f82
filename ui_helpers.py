"""
ui_helpers.py
=============
Stateless text helpers for the console interface.

These functions parse player input and render engine results into the
lines printed by cli.py. They carry no game state of their own, so they
can be tested without a terminal.

Contains:
  - parse_choice()         : console token → Choice (or None)
  - normalize_accusation() : raw accusation line → trimmed suspect name
  - render_step()          : StepResult → status lines
  - render_menu()          : Room → navigation menu lines
  - render_clue_listing()  : collected clues → alphabetical listing
  - render_verdict()       : Verdict → tally and verdict lines
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from models import ClueReport, Choice, ExplorationStatus, Room, StepResult, Verdict


# ---------------------------------------------------------------------------
# Input parsing
# ---------------------------------------------------------------------------

def parse_choice(token: Optional[str]) -> Optional[Choice]:
    """
    Map a console token to a Choice, case-insensitively.

    Only the first non-blank character counts, mirroring a single-character
    read: "E", "e" and " e " all mean left. Anything unrecognised (including
    an empty line) returns None.

    Example:
        >>> parse_choice("D")
        <Choice.RIGHT: 'd'>
        >>> parse_choice("x") is None
        True
    """
    text = (token or "").strip()
    if not text:
        return None
    try:
        return Choice(text[0].lower())
    except ValueError:
        return None


def normalize_accusation(raw: Optional[str]) -> str:
    """Trim surrounding whitespace and the trailing newline; "" means no accusation."""
    return (raw or "").strip()


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_clue_report(report: ClueReport) -> List[str]:
    if report.already_collected:
        return [f"Pista já coletada: \"{report.clue}\"."]
    lines = [f"Você encontrou uma pista: \"{report.clue}\"!"]
    if report.suspect:
        lines.append(f"Esta pista aponta para: {report.suspect}.")
    else:
        lines.append("Nenhum suspeito ligado a esta pista.")
    return lines


def render_menu(room: Room) -> List[str]:
    """
    Navigation menu for `room`, listing only the directions that exist.

    Example:
        >>> render_menu(Room("A", left=Room("B")))
        ['Para onde deseja ir?', ' e - Ir para a esquerda (B)', ' s - Sair da exploração']
    """
    lines = ["Para onde deseja ir?"]
    if room.left is not None:
        lines.append(f" e - Ir para a esquerda ({room.left.name})")
    if room.right is not None:
        lines.append(f" d - Ir para a direita ({room.right.name})")
    lines.append(" s - Sair da exploração")
    return lines


def render_step(result: StepResult) -> List[str]:
    """
    Lines describing one transition.

    Rejected choices produce only their error message; exiting produces
    only the farewell line.
    """
    if result.error:
        return [result.error]
    if result.status is ExplorationStatus.EXITED:
        return ["Saindo da exploração..."]

    lines = ["", f"Você está na sala: **{result.room.name}**"]
    if result.clue is not None:
        lines.extend(render_clue_report(result.clue))
    if result.status is ExplorationStatus.DEAD_END:
        lines.append("Não há mais caminhos a seguir. Exploração encerrada!")
    return lines


def render_clue_listing(clues: Iterable[str]) -> List[str]:
    clues = list(clues)
    if not clues:
        return ["", "Nenhuma pista foi coletada."]
    lines = ["", "=== Pistas coletadas (ordem alfabética) ==="]
    lines.extend(f" - {clue}" for clue in clues)
    return lines


def render_verdict(verdict: Verdict) -> List[str]:
    lines = [
        "",
        f"Pistas que apontam para {verdict.accused}: {verdict.tally}",
    ]
    lines.extend(f" - {clue}" for clue in verdict.supporting_clues)
    if verdict.sustained:
        lines.append(f"Acusação sustentada! {verdict.accused} é o(a) culpado(a).")
    else:
        lines.append(
            f"Acusação insuficiente: são necessárias pelo menos "
            f"{verdict.threshold} pistas contra {verdict.accused}."
        )
    return lines
