from dataclasses import replace

import pytest

import game_engine
from case_data import CLUE_SUSPECTS
from game_engine import ExplorationEngine
from models import Choice, ExplorationStatus, Room
from suspect_index import SuspectIndex


@pytest.fixture()
def engine():
    return ExplorationEngine.for_mansion()


def test_start_enters_hall_and_collects_its_clue(engine):
    result = engine.start()
    assert result.room.name == "Hall de Entrada"
    assert result.status is ExplorationStatus.EXPLORING
    assert result.clue.clue == "pegada molhada"
    assert result.clue.suspect == "Sr. Avelar"
    assert not result.clue.already_collected
    assert engine.collected_clues() == ["pegada molhada"]


def test_available_choices(engine):
    engine.start()
    assert engine.available_choices() == [Choice.LEFT, Choice.RIGHT, Choice.EXIT]
    engine.step(Choice.LEFT)
    engine.step(Choice.LEFT)
    assert engine.current_room.name == "Biblioteca"
    assert engine.available_choices() == [Choice.LEFT, Choice.EXIT]


def test_left_left_exit_scenario(engine):
    engine.start()
    sala = engine.step(Choice.LEFT)
    assert sala.room.name == "Sala de Estar"
    assert sala.clue.suspect == "Sra. Beatriz"
    biblioteca = engine.step(Choice.LEFT)
    assert biblioteca.room.name == "Biblioteca"
    assert biblioteca.clue.clue == "bilhete rasgado"
    assert biblioteca.clue.suspect == "Srta. Clara"

    result = engine.step(Choice.EXIT)
    assert result.status is ExplorationStatus.EXITED
    assert engine.is_finished
    assert engine.collected_clues() == ["bilhete rasgado", "fio de cabelo", "pegada molhada"]

    avelar = engine.accuse("Sr. Avelar")
    assert avelar.tally == 1 and not avelar.sustained
    clara = engine.accuse("Srta. Clara")
    assert clara.tally == 1 and not clara.sustained


def test_right_right_dead_end_scenario(engine):
    engine.start()
    cozinha = engine.step(Choice.RIGHT)
    assert cozinha.clue.clue == "cheiro de queimado"
    assert cozinha.clue.suspect == "Sr. Dourado"
    porao = engine.step(Choice.RIGHT)
    assert porao.room.name == "Porão"
    assert porao.clue is None
    assert porao.status is ExplorationStatus.DEAD_END
    assert engine.accuse("Sr. Dourado").tally == 1
    assert engine.visited == ["Hall de Entrada", "Cozinha", "Porão"]


def test_sustained_accusation_after_garden(engine):
    engine.start()
    engine.step(Choice.LEFT)
    engine.step(Choice.RIGHT)
    assert engine.status is ExplorationStatus.DEAD_END
    verdict = engine.accuse("Sr. Avelar")
    assert verdict.tally == 2
    assert verdict.sustained


def test_revisited_clue_is_not_duplicated(engine):
    engine.start()
    engine.step(Choice.LEFT)
    before = engine.accuse("Sra. Beatriz").tally

    report = engine.collect_clue("Sala de Estar")
    assert report.already_collected
    assert report.suspect is None
    report = engine.collect_clue("Sala de Estar")
    assert report.already_collected

    assert engine.collected_clues().count("fio de cabelo") == 1
    assert engine.accuse("Sra. Beatriz").tally == before


def test_collect_clue_in_room_without_clue(engine):
    assert engine.collect_clue("Porão") is None
    assert engine.collected_clues() == []


def test_missing_direction_is_a_no_op():
    root = Room("A", left=Room("B", left=Room("C")))
    engine = ExplorationEngine(root, {"B": "x"}, SuspectIndex())
    engine.start()
    engine.step(Choice.LEFT)

    result = engine.step(Choice.RIGHT)
    assert not result.moved
    assert result.error == "Não existe sala à direita!"
    assert result.clue is None
    assert engine.current_room.name == "B"
    assert engine.collected_clues() == ["x"]
    assert engine.status is ExplorationStatus.EXPLORING


def test_unrecognised_choice_is_a_no_op(engine):
    engine.start()
    result = engine.step(None)
    assert result.error == "Opção inválida!"
    assert engine.current_room.name == "Hall de Entrada"
    assert engine.collected_clues() == ["pegada molhada"]


def test_unlinked_clue_reports_no_suspect():
    root = Room("A", left=Room("B"))
    engine = ExplorationEngine(root, {"A": "pista solta"}, SuspectIndex.from_mapping(CLUE_SUSPECTS))
    result = engine.start()
    assert result.clue.clue == "pista solta"
    assert result.clue.suspect is None
    assert not result.clue.already_collected


def test_step_outside_exploration_raises(engine):
    with pytest.raises(RuntimeError):
        engine.step(Choice.LEFT)
    engine.start()
    with pytest.raises(RuntimeError):
        engine.start()
    engine.step(Choice.EXIT)
    with pytest.raises(RuntimeError):
        engine.step(Choice.LEFT)


def test_single_room_mansion_is_an_immediate_dead_end():
    engine = ExplorationEngine(Room("Solo"), {}, SuspectIndex())
    result = engine.start()
    assert result.status is ExplorationStatus.DEAD_END
    assert result.clue is None


def test_close_releases_everything(engine):
    engine.start()
    engine.step(Choice.LEFT)
    root = engine.root
    engine.close()
    assert root.left is None and root.right is None
    assert len(engine.clues) == 0
    assert len(engine.suspect_index) == 0


def test_close_twice_releases_nothing_more(engine):
    engine.start()
    engine.close()
    assert engine.root is None
    engine.close()
    assert len(engine.clues) == 0


def test_mansion_must_start_at_configured_room(monkeypatch):
    monkeypatch.setattr(
        game_engine, "GAME_CONFIG", replace(game_engine.GAME_CONFIG, start_room="Cozinha")
    )
    with pytest.raises(ValueError, match="Cozinha"):
        ExplorationEngine.for_mansion()


def test_mansion_starts_at_configured_room(engine):
    assert engine.start().room.name == game_engine.GAME_CONFIG.start_room
