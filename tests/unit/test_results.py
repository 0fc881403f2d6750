"""
Tests for the result mapping module.

This module contains tests for map_records_to_columns and the QueryResult class.
"""

import base64
import json

import pyarrow
import pytest

from redshift.sql.backend.models import ColumnMetadata
from redshift.sql.conversion import FieldDecoder
from redshift.sql.exc import DecodingError, EncodingError
from redshift.sql.results import QueryResult, column_names, map_records_to_columns


@pytest.fixture
def weather_columns():
    return [
        ColumnMetadata(name="id", type_name="int4"),
        ColumnMetadata(name="temperature", type_name="float8"),
        ColumnMetadata(name="humidity", type_name="float8"),
    ]


@pytest.fixture
def weather_records():
    return [
        [{"longValue": 1}, {"doubleValue": 21.5}, {"doubleValue": 0.4}],
        [{"longValue": 2}, {"doubleValue": 19.0}, {"isNull": True}],
    ]


class TestMapRecordsToColumns:
    """Test suite for map_records_to_columns."""

    def test_column_names_keep_order(self, weather_columns):
        assert column_names(weather_columns) == ["id", "temperature", "humidity"]

    def test_rows_keyed_by_column(self, weather_records):
        rows = map_records_to_columns(
            ["id", "temperature", "humidity"], weather_records
        )

        assert rows == [
            {"id": 1, "temperature": 21.5, "humidity": 0.4},
            {"id": 2, "temperature": 19.0, "humidity": ""},
        ]

    def test_every_variant(self):
        """Each field variant is decoded under its column, in column order."""
        columns = ["b", "flag", "d", "n", "s", "missing", "other"]
        record = [
            {"blobValue": b"raw"},
            {"booleanValue": True},
            {"doubleValue": 2.25},
            {"longValue": -4},
            {"stringValue": "x"},
            {"isNull": True},
            {"someFutureValue": 1},
        ]

        rows = map_records_to_columns(columns, [record, record, record])

        assert len(rows) == 3
        for row in rows:
            assert list(row.keys()) == columns
            assert row == {
                "b": b"raw",
                "flag": True,
                "d": 2.25,
                "n": -4,
                "s": "x",
                "missing": "",
                "other": "",
            }

    def test_preserves_record_order_and_duplicates(self):
        records = [[{"longValue": 3}], [{"longValue": 1}], [{"longValue": 3}]]
        rows = map_records_to_columns(["v"], records)
        assert [row["v"] for row in rows] == [3, 1, 3]

    def test_repeated_column_names_share_a_key(self):
        rows = map_records_to_columns(["a", "a"], [[{"longValue": 1}, {"longValue": 2}]])
        assert rows == [{"a": 2}]

    def test_empty_records(self):
        assert map_records_to_columns(["a"], []) == []

    @pytest.mark.parametrize(
        "record", [[{"longValue": 1}], [{"longValue": 1}] * 3], ids=["short", "long"]
    )
    def test_width_mismatch_fails_fast(self, record):
        with pytest.raises(EncodingError) as excinfo:
            map_records_to_columns(["a", "b"], [[{"longValue": 0}] * 2, record])

        assert excinfo.value.context["row-index"] == 1
        assert excinfo.value.context["row-width"] == len(record)
        assert excinfo.value.context["column-count"] == 2

    def test_strict_decoder_is_used(self):
        with pytest.raises(DecodingError):
            map_records_to_columns(
                ["a"], [[{"unknown": 1}]], decoder=FieldDecoder(strict=True)
            )


class TestQueryResult:
    """Test suite for the QueryResult class."""

    def test_sequence_behaviour(self, weather_columns, weather_records):
        result = QueryResult("stmt-1", weather_columns, weather_records)

        assert len(result) == 2
        assert result[0]["id"] == 1
        assert [row["id"] for row in result] == [1, 2]
        assert result.columns == ["id", "temperature", "humidity"]
        assert result.statement_id == "stmt-1"

    def test_width_mismatch_raises_on_construction(self, weather_columns):
        with pytest.raises(EncodingError):
            QueryResult("stmt-1", weather_columns, [[{"longValue": 1}]])

    def test_to_json(self, weather_columns, weather_records):
        result = QueryResult("stmt-1", weather_columns, weather_records)

        payload = json.loads(result.to_json())

        assert payload == [
            {"id": 1, "temperature": 21.5, "humidity": 0.4},
            {"id": 2, "temperature": 19.0, "humidity": ""},
        ]

    def test_to_json_encodes_binary_as_base64(self):
        result = QueryResult(
            "stmt-1",
            [ColumnMetadata(name="b"), ColumnMetadata(name="ok")],
            [[{"blobValue": b"\xffdata"}, {"booleanValue": False}]],
        )

        payload = json.loads(result.to_json())

        assert payload == [
            {"b": base64.b64encode(b"\xffdata").decode("ascii"), "ok": False}
        ]

    @pytest.mark.parametrize(
        "value", [float("nan"), float("inf"), float("-inf")], ids=["nan", "inf", "-inf"]
    )
    def test_to_json_rejects_non_finite_floats(self, value):
        result = QueryResult(
            "stmt-1", [ColumnMetadata(name="d")], [[{"doubleValue": value}]]
        )

        with pytest.raises(EncodingError) as excinfo:
            result.to_json()

        assert str(excinfo.value).startswith("cannot marshal json")
        assert excinfo.value.context["statement-id"] == "stmt-1"

    def test_to_json_empty(self):
        assert QueryResult("stmt-1", [], []).to_json() == b"[]"

    def test_to_arrow_table_keeps_nulls(self, weather_columns, weather_records):
        table = QueryResult("stmt-1", weather_columns, weather_records).to_arrow_table()

        assert isinstance(table, pyarrow.Table)
        assert table.column_names == ["id", "temperature", "humidity"]
        assert table.num_rows == 2
        assert table.column("humidity").to_pylist() == [0.4, None]
        assert table.column("id").to_pylist() == [1, 2]

    def test_to_arrow_table_mixed_types(self):
        result = QueryResult(
            "stmt-1",
            [ColumnMetadata(name="v")],
            [[{"longValue": 1}], [{"stringValue": "one"}]],
        )

        with pytest.raises(EncodingError):
            result.to_arrow_table()

    def test_to_pandas(self, weather_columns, weather_records):
        df = QueryResult("stmt-1", weather_columns, weather_records).to_pandas()

        assert list(df.columns) == ["id", "temperature", "humidity"]
        assert df["id"].tolist() == [1, 2]
        assert df["temperature"].tolist() == [21.5, 19.0]
