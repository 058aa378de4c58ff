from .engine import match_field, normalize_search_query, search

__all__ = ["match_field", "normalize_search_query", "search"]
