"""I/O layer: results store, Parquet run log and output paths."""
