"""Tests for persisted UI value cells."""

import pytest
from sqlmodel import Session, create_engine

from frontend.database.models import StoredValue
from frontend.utils.local_state import LocalStateCell


@pytest.fixture
def engine(tmp_path):
    return create_engine(f"sqlite:///{tmp_path / 'state.db'}")


def test_missing_key_loads_default(engine):
    cell = LocalStateCell("tutorneo.taskConfig", {"topic": "Ciclo del agua"}, bind=engine)
    assert cell.load() == {"topic": "Ciclo del agua"}


def test_default_is_not_shared_between_loads(engine):
    cell = LocalStateCell("tutorneo.messages", [], bind=engine)
    cell.load().append({"role": "user"})
    assert cell.load() == []


def test_save_then_load_overwrites(engine):
    cell = LocalStateCell("tutorneo.evaluation", None, bind=engine)
    cell.save({"status": "Aprobado", "score": 95})
    cell.save({"status": "En proceso", "score": 30})
    assert cell.load() == {"status": "En proceso", "score": 30}


def test_cells_are_independent(engine):
    prompt = LocalStateCell("tutorneo.systemPrompt", "default", bind=engine)
    messages = LocalStateCell("tutorneo.messages", [], bind=engine)

    prompt.save("Sos TutorNeo.")

    assert messages.load() == []
    assert prompt.load() == "Sos TutorNeo."


def test_corrupt_value_degrades_to_default(engine):
    cell = LocalStateCell("tutorneo.preferences", {"theme": "light"}, bind=engine)
    with Session(engine) as session:
        session.add(StoredValue(key="tutorneo.preferences", value="{not json"))
        session.commit()

    assert cell.load() == {"theme": "light"}


def test_null_is_a_real_stored_value(engine):
    cell = LocalStateCell("tutorneo.evaluation", {"score": 1}, bind=engine)
    cell.save(None)
    assert cell.load() is None
