"""
Tests for the tabular catalog views
"""
from services.catalog_service import astronaut_flights, missions_frame


def test_missions_frame_columns_and_order(sample_catalog):
    df = missions_frame(sample_catalog)
    assert list(df.columns) == ["id", "mission", "launch_date", "crew_size", "commander"]
    assert df["id"].tolist() == [1, 11]
    assert df["mission"].tolist() == ["Apollo 1", "Apollo 11"]
    assert df["launch_date"].tolist() == ["", "1969-07-16"]
    assert df["crew_size"].tolist() == [1, 2]
    assert df["commander"].tolist() == ["Edwin \"Buzz\" Aldrin", "Neil A. Armstrong"]


def test_astronaut_flights_sorted_by_count(sample_catalog):
    df = astronaut_flights(sample_catalog)
    assert list(df.columns) == ["id", "name", "missions"]
    assert df["id"].tolist() == ["aldrin", "armstrong"]
    assert df["missions"].tolist() == [2, 1]
