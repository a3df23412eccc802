"""In-memory keyed record store with completion state and filtered listing."""
from .ids import IdStrategy, MonotonicIds, RandomIds, make_id_strategy
from .models import ListFilter, Record, RecordCounts
from .seed import Seed, SeedFormatError, load_seed, parse_seed
from .store import InvalidLabelError, RecordStore

__all__ = [
    "IdStrategy", "MonotonicIds", "RandomIds", "make_id_strategy",
    "ListFilter", "Record", "RecordCounts",
    "Seed", "SeedFormatError", "load_seed", "parse_seed",
    "InvalidLabelError", "RecordStore"]
