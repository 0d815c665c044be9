"""Two sessions racing on a file-backed SQLite database."""

import threading
import time

import pytest
from sqlalchemy import event
from sqlalchemy.orm import sessionmaker

from core.club_manager import ClubManager
from core.store import StateStore
from database import Base, create_db_engine
from schemas import InstantiateMsg, parse_execute_msg, parse_query_msg


@pytest.fixture
def file_engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'club.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


def test_update_is_not_interleaved_with_another_writer(file_engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=file_engine)

    setup = Session()
    ClubManager.instantiate(setup, "creator", InstantiateMsg(count=17, x_factor=17))
    setup.close()

    errors = []

    def other_writer():
        session = Session()
        try:
            ClubManager.execute(session, "other", parse_execute_msg({"increment": {}}))
        except Exception as e:
            errors.append(e)
        finally:
            session.close()

    writer = threading.Thread(target=other_writer)

    def slow_increment(state):
        # the other writer starts while this update holds the store
        writer.start()
        time.sleep(0.3)
        state.count += 1
        return state

    first = Session()
    try:
        StateStore(first).update(slow_increment)
        first.commit()
    finally:
        first.close()

    writer.join(timeout=10)
    assert not writer.is_alive()
    assert errors == []

    reader = Session()
    try:
        assert ClubManager.query(reader, parse_query_msg({"get_count": {}})).count == 19
    finally:
        reader.close()


def test_sqlite_transactions_take_the_write_lock_up_front(file_engine):
    statements = []

    @event.listens_for(file_engine, "before_cursor_execute")
    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    with file_engine.begin() as conn:
        conn.exec_driver_sql("SELECT 1")

    assert "BEGIN IMMEDIATE" in statements
