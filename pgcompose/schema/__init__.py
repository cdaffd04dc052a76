"""pgcompose data model and hand-off converters."""
from pgcompose.schema.query_config import MISSING, QueryConfig

__all__ = ["MISSING", "QueryConfig"]
