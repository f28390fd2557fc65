"""Loading of food lookup tables."""

import logging
from pathlib import Path

from nutritrack.domain.tables import FoodTables

DEFAULT_TABLES_PATH = Path(__file__).resolve().parents[1] / "data" / "food_tables.json"

_logger = logging.getLogger(__name__)


def load_food_tables(path: str | Path | None = None) -> FoodTables:
    """Load and validate food tables from JSON, defaulting to the bundled file."""
    resolved = Path(path) if path else DEFAULT_TABLES_PATH
    tables = FoodTables.model_validate_json(resolved.read_text(encoding="utf-8"))
    _logger.info(
        "Loaded food tables from %s: densities=%s weights=%s units=%s",
        resolved,
        len(tables.densities),
        len(tables.standard_weights),
        len(tables.units),
    )
    return tables
