from .config import SolverConfig, DEFAULT_CONFIG, MIN_WORD_LENGTH, DEFAULT_DICTIONARY
from .hive import Hive
from .matcher import is_valid_word

__all__ = ["SolverConfig", "DEFAULT_CONFIG", "MIN_WORD_LENGTH", "DEFAULT_DICTIONARY",
           "Hive", "is_valid_word"]
