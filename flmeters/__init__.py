"""Training meters, a file-backed key/value store and an LRU cache."""

__version__ = "0.1.0"

__all__ = [
    "average_value",
    "count",
    "edit_distance",
    "file_store",
    "frame_error",
    "lru_cache",
    "mse",
    "time_meter",
]