# frontend/utils/local_state.py
import copy
import json
import logging
from datetime import datetime
from typing import Any, Generic, TypeVar

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from frontend.database.models import StoredValue
from frontend.database.session import get_session, init_db

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LocalStateCell(Generic[T]):
    """
    A single persisted UI value, addressed by key.

    load() falls back to the default when the key is missing, the stored
    JSON is corrupt, or the store cannot be read. save() overwrites the key.
    Cells are independent: there is no transaction across keys.
    """

    def __init__(self, key: str, default: T, bind: Engine = None):
        self.key = key
        self.default = default
        self.bind = bind
        init_db(bind)

    def _default(self) -> T:
        return copy.deepcopy(self.default)

    def load(self) -> T:
        try:
            with get_session(self.bind) as session:
                row = session.get(StoredValue, self.key)
                raw = row.value if row else None
        except SQLAlchemyError as e:
            logger.warning(f"Could not read '{self.key}' from local state: {e}")
            return self._default()

        if raw is None:
            return self._default()
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning(f"Corrupt value stored under '{self.key}', using default")
            return self._default()

    def save(self, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        with get_session(self.bind) as session:
            row = session.get(StoredValue, self.key)
            if row is None:
                row = StoredValue(key=self.key, value=payload)
            else:
                row.value = payload
                row.updated_at = datetime.utcnow()
            session.add(row)
            session.commit()

    def __repr__(self):
        return f"<LocalStateCell key={self.key}>"
