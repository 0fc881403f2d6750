from __future__ import annotations

import base64
import json
import logging
from collections import abc
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

import pyarrow

from redshift.sql.backend.models import ColumnMetadata
from redshift.sql.conversion import FieldDecoder, FieldTag
from redshift.sql.exc import EncodingError

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


def column_names(column_metadata: Sequence[ColumnMetadata]) -> List[str]:
    """Return the column names in result order."""
    return [column.name for column in column_metadata]


def map_records_to_columns(
    columns: Sequence[str],
    records: Sequence[Sequence[Mapping[str, Any]]],
    decoder: Optional[FieldDecoder] = None,
) -> List[Row]:
    """
    Turn a grid of Data API fields into one dict per record.

    Field ``i`` of every record is stored under ``columns[i]``; records keep
    their order. Repeated column names share one key, so the last field
    with that name wins and the row has fewer keys than there are columns.

    Raises:
        EncodingError: If a record does not have exactly one field per column
    """
    decoder = decoder or FieldDecoder()
    width = len(columns)
    rows: List[Row] = []
    for index, record in enumerate(records):
        if len(record) != width:
            raise EncodingError(
                "Row {} has {} fields but the result has {} columns".format(
                    index, len(record), width
                ),
                {"row-index": index, "row-width": len(record), "column-count": width},
            )
        rows.append(
            {name: decoder.decode(field) for name, field in zip(columns, record)}
        )
    return rows


def _json_default(value: Any) -> Any:
    # Binary values are written as base64 text
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    raise TypeError(
        "Object of type {} is not JSON serializable".format(type(value).__name__)
    )


class QueryResult(abc.Sequence):
    """
    Rows of a finished statement, keyed by column name.

    Behaves as a read-only sequence of dicts and can be exported as JSON,
    an Arrow table or a pandas DataFrame.
    """

    def __init__(
        self,
        statement_id: str,
        column_metadata: Sequence[ColumnMetadata],
        records: Sequence[Sequence[Mapping[str, Any]]],
        decoder: Optional[FieldDecoder] = None,
    ):
        self.statement_id = statement_id
        self.column_metadata = list(column_metadata)
        self.columns = column_names(self.column_metadata)
        self._decoder = decoder or FieldDecoder()
        self._records = records
        self.rows = map_records_to_columns(self.columns, records, self._decoder)

    def __getitem__(self, index):
        return self.rows[index]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __repr__(self):
        return "QueryResult(statement_id={!r}, columns={!r}, rows={})".format(
            self.statement_id, self.columns, len(self.rows)
        )

    def to_json(self) -> bytes:
        """
        Serialize the rows as a JSON array of objects.

        Raises:
            EncodingError: If a value cannot be serialized
        """
        try:
            return json.dumps(
                self.rows, default=_json_default, allow_nan=False
            ).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingError(
                "cannot marshal json: {}".format(e),
                {"statement-id": self.statement_id},
            ) from e

    def _arrow_value(self, field: Mapping[str, Any]) -> Any:
        # Arrow keeps SQL NULL as a real null instead of an empty string
        if field.get(FieldTag.IS_NULL):
            return None
        return self._decoder.decode(field)

    def to_arrow_table(self) -> "pyarrow.Table":
        """
        Convert the result to an Arrow table, one column per result column.

        Raises:
            EncodingError: If a column mixes values Arrow cannot unify
        """
        data = {
            name: [self._arrow_value(record[i]) for record in self._records]
            for i, name in enumerate(self.columns)
        }
        try:
            return pyarrow.Table.from_pydict(data)
        except (pyarrow.ArrowInvalid, pyarrow.ArrowTypeError) as e:
            raise EncodingError(
                "cannot convert result to arrow: {}".format(e),
                {"statement-id": self.statement_id},
            ) from e

    def to_pandas(self):
        """Convert the result to a pandas DataFrame."""
        return self.to_arrow_table().to_pandas()
