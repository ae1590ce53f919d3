"""Console rendering of measurement records."""
from .formatter import best_unit, format_duration, print_result, print_unit_table
