"""
Tests for services/place_service.py.
"""

from unittest.mock import MagicMock, patch

import pytest

from models.place import Place
from services.place_service import (
    QUERY_TELCODE,
    SAMPLE_PLACES,
    STRUCT_PLACE,
    PlaceService,
)
from utils.errors import PlaceNotFoundError


@pytest.fixture
def service():
    svc = PlaceService(schema="test6", dsn="postgresql://x")
    svc.repo = MagicMock()
    return svc


def test_sample_places_include_null_cities():
    assert len(SAMPLE_PLACES) == 5
    assert ("Hong Kong", None, 852) in SAMPLE_PLACES
    assert sum(1 for _, city, _ in SAMPLE_PLACES if city is None) == 2


def test_connect_reports_server_version(mock_db):
    service = PlaceService(dsn="postgresql://x")
    assert service.connect() == "Connected to PostgreSQL 15.4"
    mock_db[1].close.assert_called_once()


def test_create_schema_delegates_to_init_db(service):
    with patch("services.place_service.init_db.create_schema") as create_schema:
        assert service.create_schema() == "Schema 'test6' created."
    create_schema.assert_called_once_with("test6", "postgresql://x")


def test_select_schema_reports_search_path(service):
    with patch("services.place_service.init_db.select_schema", return_value="test6"):
        assert service.select_schema() == "search_path is test6 (this session only)"


def test_create_table_delegates_to_init_db(service):
    with patch("services.place_service.init_db.create_table") as create_table:
        service.create_table()
    create_table.assert_called_once_with("test6", "postgresql://x")


def test_insert_rows(service):
    service.repo.insert_rows.return_value = 5
    assert service.insert_rows() == "Inserted rows: 5"
    service.repo.insert_rows.assert_called_once_with(SAMPLE_PLACES)


def test_insert_struct(service):
    service.repo.add.return_value = 1
    assert service.insert_struct() == "Affected rows: 1"
    service.repo.add.assert_called_once_with(STRUCT_PLACE)


def test_query_row_null_city(service):
    service.repo.get_by_telcode.return_value = Place(id=1, country="Hong Kong", telephone_code=852)
    assert service.query_row() == "Hong Kong, N.A, 852"
    service.repo.get_by_telcode.assert_called_once_with(QUERY_TELCODE)


def test_query_row_not_found(service):
    service.repo.get_by_telcode.return_value = None
    with pytest.raises(PlaceNotFoundError) as info:
        service.query_row(999)
    assert info.value.telcode == 999


def test_query_rows(service):
    service.repo.get_all.return_value = [
        Place(country="Hong Kong", telephone_code=852),
        Place(country="Germany", city="Berlin", telephone_code=49),
    ]
    assert service.query_rows() == "Hong Kong, N.A, 852\nGermany, Berlin, 49"


def test_query_rows_empty(service):
    service.repo.get_all.return_value = []
    assert service.query_rows() == "No rows in table."


def test_count_rows(service):
    service.repo.count.return_value = 6
    assert service.count_rows() == "Num of rows in table: 6"


def test_delete_all_rows(service):
    service.repo.delete_all.return_value = 6
    assert service.delete_all_rows() == "Deleted rows: 6"
