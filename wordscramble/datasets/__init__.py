from .validator import validate_root_words, pretty_summary
from .io import read_lines, write_lines, clean_root_words, load_root_words

__all__ = ["validate_root_words", "pretty_summary", "read_lines", "write_lines",
           "clean_root_words", "load_root_words"]
