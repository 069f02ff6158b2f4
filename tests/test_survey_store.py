"""Tests for the SQLite survey store."""

import sqlite3

import pytest

from student_survey_api.app.schemas.survey import Survey
from student_survey_api.app.services.survey_store import SQLiteSurveyStore


class TestSQLiteSurveyStore:
    """Test SQLiteSurveyStore against a temp database."""

    def test_save_new_assigns_increasing_ids(self, store):
        first = store.save(Survey(first_name="A"))
        second = store.save(Survey(first_name="B"))
        assert first.id == 1
        assert second.id == 2

    def test_save_does_not_mutate_input(self, store):
        survey = Survey(first_name="A")
        store.save(survey)
        assert survey.id is None

    def test_save_existing_overwrites(self, store):
        saved = store.save(Survey(first_name="A", last_name="B", email="a@b"))
        store.save(Survey(id=saved.id, first_name="C", last_name="D", email="c@d"))
        assert store.find_by_id(saved.id) == Survey(id=saved.id, first_name="C", last_name="D", email="c@d")
        assert len(store.find_all()) == 1

    def test_save_with_unknown_id_inserts(self, store):
        store.save(Survey(id=50, first_name="X"))
        assert store.find_by_id(50).first_name == "X"

    def test_find_all_orders_by_id(self, store):
        for name in ("c", "a", "b"):
            store.save(Survey(first_name=name))
        assert [s.first_name for s in store.find_all()] == ["c", "a", "b"]

    def test_find_by_id_missing(self, store):
        assert store.find_by_id(7) is None

    def test_delete_missing_is_noop(self, store):
        store.save(Survey(first_name="A"))
        store.delete_by_id(99)
        assert len(store.find_all()) == 1

    def test_deleted_ids_are_not_reused(self, store):
        first = store.save(Survey(first_name="A"))
        store.delete_by_id(first.id)
        assert store.save(Survey(first_name="B")).id == first.id + 1

    def test_uninitialised_database_raises(self, tmp_path):
        """Missing schema surfaces as a raw sqlite error."""
        store = SQLiteSurveyStore(str(tmp_path / "empty.db"))
        with pytest.raises(sqlite3.OperationalError):
            store.find_all()

    def test_save_with_out_of_range_id_raises(self, store):
        with pytest.raises(ValueError):
            store.save(Survey(id=2 ** 63, first_name="X"))
        assert store.find_all() == []

    def test_boundary_id_is_usable(self, store):
        store.save(Survey(id=2 ** 63 - 1, first_name="Max"))
        assert store.find_by_id(2 ** 63 - 1).first_name == "Max"
