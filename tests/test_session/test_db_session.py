from __future__ import annotations

from unittest.mock import Mock, patch
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from app.db.session import SessionLocal, build_engine, engine, get_db, init_db


class TestDatabaseSession:
    """Test database session functionality."""

    def test_session_local_configuration(self):
        assert hasattr(SessionLocal, '__call__')
        assert SessionLocal.kw.get('autoflush') is False

    def test_engine_configuration(self):
        assert engine is not None
        assert engine.url is not None

    def test_build_engine_sqlite(self):
        sqlite_engine = build_engine("sqlite://")
        try:
            assert sqlite_engine.dialect.name == "sqlite"
        finally:
            sqlite_engine.dispose()

    def test_init_db_creates_tables(self):
        sqlite_engine = build_engine("sqlite://")
        try:
            init_db(sqlite_engine)
            tables = set(inspect(sqlite_engine).get_table_names())
            assert {"authors", "books", "prizes", "book_author"} <= tables
        finally:
            sqlite_engine.dispose()

    @patch('app.db.session.SessionLocal')
    def test_get_db_yields_and_closes(self, mock_session_local):
        mock_db = Mock(spec=Session)
        mock_session_local.return_value = mock_db

        generator = get_db()
        session = next(generator)

        mock_session_local.assert_called_once()
        assert session == mock_db
        mock_db.close.assert_not_called()

        try:
            next(generator)
        except StopIteration:
            pass

        mock_db.close.assert_called_once()

    @patch('app.db.session.SessionLocal')
    def test_get_db_closes_on_error(self, mock_session_local):
        mock_db = Mock(spec=Session)
        mock_session_local.return_value = mock_db

        generator = get_db()
        next(generator)
        try:
            generator.throw(RuntimeError("request failed"))
        except RuntimeError:
            pass

        mock_db.close.assert_called_once()
