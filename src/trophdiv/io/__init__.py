"""Input collaborators: CSV loading and example data."""

from .loader import load_abundance_table, load_trophic_levels
from .example import generate_example

__all__ = ["load_abundance_table", "load_trophic_levels", "generate_example"]
