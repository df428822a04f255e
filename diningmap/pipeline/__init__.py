"""Pipeline package: cleaning, geocoding, correction and output."""

from diningmap.pipeline.cleaner import clean_records
from diningmap.pipeline.corrector import CorrectionTable, apply_corrections
from diningmap.pipeline.geocoder import build_geocoder, geocode_rows
from diningmap.pipeline.models import Coordinates, DiningLocationRow, Offset
from diningmap.pipeline.table import write_table

__all__ = [
    "clean_records",
    "geocode_rows",
    "build_geocoder",
    "apply_corrections",
    "CorrectionTable",
    "write_table",
    "Coordinates",
    "DiningLocationRow",
    "Offset",
]
