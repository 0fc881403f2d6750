"""
Field conversion utilities for the Redshift Data API connector.

The Data API returns every cell as a tagged ``Field`` object holding exactly
one of ``blobValue``, ``booleanValue``, ``doubleValue``, ``longValue``,
``stringValue`` or ``isNull``. This module turns such a field into a plain
Python value.
"""

import logging
from typing import Any, Callable, Dict, Mapping

from redshift.sql.exc import DecodingError

logger = logging.getLogger(__name__)

# Value returned for SQL NULL and for fields with no recognised tag
NULL_VALUE = ""


class FieldTag:
    """Names of the value members of a Data API ``Field``."""

    BLOB = "blobValue"
    BOOLEAN = "booleanValue"
    DOUBLE = "doubleValue"
    LONG = "longValue"
    STRING = "stringValue"
    IS_NULL = "isNull"


class FieldDecoder:
    """
    Converts Data API ``Field`` members to Python values.

    In the default mode decoding is total: null fields and fields with an
    unknown tag both decode to an empty string. With ``strict=True`` an
    unknown tag raises DecodingError.
    """

    TAG_MAPPING: Dict[str, Callable[[Any], Any]] = {
        FieldTag.BLOB: lambda v: bytes(v),
        FieldTag.BOOLEAN: lambda v: bool(v),
        FieldTag.DOUBLE: lambda v: float(v),
        FieldTag.LONG: lambda v: int(v),
        FieldTag.STRING: lambda v: str(v),
        FieldTag.IS_NULL: lambda v: NULL_VALUE,
    }

    def __init__(self, strict: bool = False):
        self.strict = strict

    def decode(self, field: Mapping[str, Any]) -> Any:
        """
        Decode one field.

        Args:
            field: A ``Field`` mapping as returned by GetStatementResult

        Returns:
            bytes, bool, float, int or str. Null fields give an empty string.

        Raises:
            DecodingError: In strict mode, if no known tag is present
        """
        for tag, converter in self.TAG_MAPPING.items():
            if tag in field:
                return converter(field[tag])

        if self.strict:
            raise DecodingError(
                "Unrecognised result field: {}".format(sorted(field)),
                {"field-tags": sorted(field)},
            )
        logger.debug("Unrecognised result field tags %s, using empty string", sorted(field))
        return NULL_VALUE


_default_decoder = FieldDecoder()


def decode_field(field: Mapping[str, Any], strict: bool = False) -> Any:
    """Decode a single ``Field`` with a shared decoder."""
    if strict:
        return FieldDecoder(strict=True).decode(field)
    return _default_decoder.decode(field)
