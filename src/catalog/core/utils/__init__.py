from .merge import copy_non_null_fields

__all__ = ["copy_non_null_fields"]
