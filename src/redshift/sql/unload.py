"""
UNLOAD statement rendering.

``build_unload_query`` is a plain string template. It does not quote or
escape the query, the S3 path or any option value: callers must make sure
interpolated identifiers and paths are trusted.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from redshift.sql.exc import ValidationError


@dataclass(frozen=True)
class UnloadOption:
    """Settings of one UNLOAD statement."""

    s3_path: str
    iam_role: str = "default"
    format: str = "CSV"
    partition_by: Optional[Sequence[str]] = None
    header: bool = True
    delimiter: str = ","
    allow_overwrite: bool = True
    parallel: bool = False
    max_file_size: str = "1GB"
    extension: str = "csv"

    @classmethod
    def default(cls, s3_path: str) -> "UnloadOption":
        """CSV with a header row, written serially as files of up to 1GB."""
        return cls(s3_path=s3_path)


def build_unload_query(query: str, option: UnloadOption) -> str:
    """
    Render an UNLOAD statement exporting ``query`` to ``option.s3_path``.

    Optional clauses always appear in this order: PARTITION BY, HEADER,
    ALLOWOVERWRITE, PARALLEL OFF, DELIMITER, FORMAT AS, MAXFILESIZE,
    EXTENSION. PARALLEL OFF is written only when parallel is disabled;
    nothing is written when it is enabled.

    Raises:
        ValidationError: If the S3 path is empty
    """
    if not option.s3_path:
        raise ValidationError("S3Path is required", {"option": "s3_path"})

    lines: List[str] = [
        "UNLOAD ($$ {} $$)".format(query),
        "TO '{}'".format(option.s3_path),
        "IAM_ROLE {}".format(option.iam_role),
    ]

    if option.partition_by:
        lines.append("PARTITION BY ({})".format(", ".join(option.partition_by)))

    if option.header:
        lines.append("HEADER")

    if option.allow_overwrite:
        lines.append("ALLOWOVERWRITE")

    if not option.parallel:
        lines.append("PARALLEL OFF")

    lines.append("DELIMITER '{}'".format(option.delimiter))
    lines.append("FORMAT AS {}".format(option.format))
    lines.append("MAXFILESIZE {}".format(option.max_file_size))
    lines.append("EXTENSION '{}'".format(option.extension))

    return "\n".join(lines)
