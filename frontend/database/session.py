# frontend/database/session.py
from sqlalchemy.engine import Engine
from sqlmodel import create_engine, Session, SQLModel
import os

DB_URL = os.getenv("TUTORNEO_STATE_DB", "sqlite:///./tutorneo_state.db")
engine = create_engine(DB_URL, echo=False)

def init_db(bind: Engine = None):
    from frontend.database import models  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)

def get_session(bind: Engine = None) -> Session:
    return Session(bind or engine)
