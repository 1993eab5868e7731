from .validator import validate_dictionary, pretty_summary
from .io import is_readable, iter_lines, read_lines, write_lines

__all__ = ["validate_dictionary", "pretty_summary", "is_readable", "iter_lines",
           "read_lines", "write_lines"]
