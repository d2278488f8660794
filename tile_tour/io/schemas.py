"""Parquet schema for the per-run tour log.

Every run appended by the batch runner follows this column contract, so
downstream analysis can read any log produced by any version sharing the
same ``schema_version``.
"""

from __future__ import annotations

import pyarrow as pa

RUN_LOG_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("tile", pa.string()),
        ("direction", pa.string()),
        ("rotation", pa.string()),
        ("suggested_direction", pa.string()),
        ("suggested_rotation", pa.string()),
        ("iterations", pa.int64()),
        ("max_length", pa.int64()),
        ("path_length", pa.int64()),
        ("success", pa.bool_()),
        ("exhausted", pa.bool_()),
        ("time", pa.string()),
    ]
)
