"""Product catalog service.

A FastAPI + SQLModel backend exposing create, list, fetch, partial update and
delete operations over product records.
"""

__version__ = "0.1.0"
