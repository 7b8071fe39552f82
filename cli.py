"""
cli.py
======
Command-line interface for Detective Quest: Mansion Exploration.

Runs the text game loop: explore the mansion one room at a time, review the
collected clues in alphabetical order, then accuse a suspect. All game
logic is delegated to ExplorationEngine; this module only handles I/O.

Usage:
    python cli.py          (or the installed ``detective-quest`` script)

Keys during exploration (case-insensitive):
    e — go left
    d — go right
    s — stop exploring

Exit codes:
    0 — normal completion, including early exit or an empty accusation
    1 — fatal allocation failure
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from dotenv import load_dotenv

from case_data import SUSPECTS
from config import LoggingConfig
from game_engine import ExplorationEngine
from ui_helpers import (
    normalize_accusation,
    parse_choice,
    render_clue_listing,
    render_menu,
    render_step,
    render_verdict,
)

logger = logging.getLogger("detective_quest.cli")

InputFn  = Callable[[str], str]
OutputFn = Callable[[str], None]


def _read(input_fn: InputFn, prompt: str) -> Optional[str]:
    """Read one line; None on end of input."""
    try:
        return input_fn(prompt)
    except EOFError:
        return None


def explore(engine: ExplorationEngine, input_fn: InputFn, output: OutputFn) -> None:
    """
    Drive the engine until the player exits or reaches a dead end.

    Blank lines are skipped silently and the read continues, as a
    single-character read skips whitespace. End of input at the prompt is
    treated as choosing to exit.
    """
    result = engine.start()
    for line in render_step(result):
        output(line)

    while not result.finished:
        for line in render_menu(engine.current_room):
            output(line)
        token = _read(input_fn, "Escolha: ")
        while token is not None and not token.strip():
            token = _read(input_fn, "")
        choice = parse_choice("s" if token is None else token)
        result = engine.step(choice)
        for line in render_step(result):
            output(line)


def accuse(engine: ExplorationEngine, input_fn: InputFn, output: OutputFn) -> None:
    """Show the collected clues, then read and judge the accusation."""
    for line in render_clue_listing(engine.collected_clues()):
        output(line)

    output("")
    output(f"Suspeitos: {', '.join(SUSPECTS)}")
    accused = normalize_accusation(
        _read(input_fn, "Quem você acusa? (Enter para encerrar sem acusar): ")
    )
    if not accused:
        output("Nenhuma acusação feita. Fim de jogo.")
        return

    for line in render_verdict(engine.accuse(accused)):
        output(line)


def run_cli(input_fn: InputFn = input, output: OutputFn = print) -> int:
    """
    Play one full game and return the process exit code.

    MemoryError from any allocation in the core is fatal: a diagnostic is
    printed and 1 is returned without attempting further play.
    """
    try:
        engine = ExplorationEngine.for_mansion()
        try:
            output("=== Detective Quest – Exploração da Mansão ===")
            explore(engine, input_fn, output)
            accuse(engine, input_fn, output)
        finally:
            engine.close()
    except MemoryError:
        logger.critical("Memory allocation failed; terminating.")
        print("Erro ao alocar memória.", file=sys.stderr)
        return 1
    return 0


def configure_logging(cfg: Optional[LoggingConfig] = None) -> None:
    """
    Configure logging at the entry point so all detective_quest.* loggers
    share one handler. Swap basicConfig for a FileHandler here to send logs
    to disk without touching any other module.
    """
    cfg = cfg or LoggingConfig.from_env()
    logging.basicConfig(level=cfg.level, format=cfg.format, datefmt=cfg.datefmt)


def main() -> None:
    # Load .env before reading the log level override.
    load_dotenv()
    configure_logging()
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
