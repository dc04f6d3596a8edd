"""Services module - Business logic layer"""

from .alignment import align
from .config_manager import ConfigManager
from .diff_generator import DiffGenerator, compute_diff
from .inline_diff import inline_diff
from .reconciler import reconcile
from .segmenter import segment
from .similarity import levenshtein_distance, similarity

__all__ = [
    "align",
    "ConfigManager",
    "DiffGenerator",
    "compute_diff",
    "inline_diff",
    "reconcile",
    "segment",
    "levenshtein_distance",
    "similarity",
]
