from .errors import LengthMismatch, InvalidSymbol
from .scoring import FeedbackSymbol, Feedback, compute_feedback, feedback_to_str
from .patterns import PatternSymbol, Pattern, parse_pattern, parse_patterns, pattern_to_str, \
    matches, expand_pattern
from .search import SearchResult, search
from .index import FeedbackIndex
from .validation import normalize_word, is_valid_word, check_query

__all__ = [
    "LengthMismatch", "InvalidSymbol",
    "FeedbackSymbol", "Feedback", "compute_feedback", "feedback_to_str",
    "PatternSymbol", "Pattern", "parse_pattern", "parse_patterns", "pattern_to_str",
    "matches", "expand_pattern",
    "SearchResult", "search", "FeedbackIndex",
    "normalize_word", "is_valid_word", "check_query",
]
