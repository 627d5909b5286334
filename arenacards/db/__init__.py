from arenacards.db.database import drop_db, init_db, make_engine, make_session_factory
from arenacards.db.operations import (
    database_summary,
    get_card,
    get_cards_by_arena_id,
    write_cards,
)

__all__ = [
    "database_summary",
    "drop_db",
    "get_card",
    "get_cards_by_arena_id",
    "init_db",
    "make_engine",
    "make_session_factory",
    "write_cards",
]
