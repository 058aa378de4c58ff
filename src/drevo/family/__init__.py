from .enumerator import get_family

__all__ = ["get_family"]
