"""Partial-copy helpers for pydantic models."""

from collections.abc import Iterable
from typing import TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def copy_non_null_fields(
    source: BaseModel,
    target: ModelT,
    exclude: Iterable[str] = ("id",),
) -> ModelT:
    """Copy every non-null field of ``source`` onto ``target`` in place.

    Only fields declared on both models are considered, and fields named in
    ``exclude`` are never copied. Fields that are ``None`` (or were never set)
    on the source leave the target untouched, so a source with nothing set is
    a no-op. The copy is shallow.

    Args:
        source: Model carrying the values to apply
        target: Model receiving them
        exclude: Field names that must keep the target's value

    Returns:
        The same ``target`` instance.
    """
    skipped = set(exclude)
    target_fields = type(target).model_fields

    for field_name in type(source).model_fields:
        if field_name in skipped or field_name not in target_fields:
            continue
        value = getattr(source, field_name)
        if value is None:
            continue
        setattr(target, field_name, value)

    return target
