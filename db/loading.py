"""Explicit nested loading for repository reads.

An ``Include`` names one related collection and, optionally, the columns to
load from it. Repositories declare their includes as constants so the shape
of each read is visible next to the query.
"""
from dataclasses import dataclass
from typing import Optional, Sequence

from sqlalchemy import inspect
from sqlalchemy.orm import selectinload


@dataclass(frozen=True)
class Include:
    relationship: str
    columns: Optional[tuple[str, ...]] = None


def loader_options(model: type, includes: Sequence[Include]) -> list:
    """Translate includes into ``selectinload(...).load_only(...)`` options.

    Raises ValueError for unknown relationship or column names.
    """
    mapper = inspect(model)
    options = []
    for include in includes:
        rel = mapper.relationships.get(include.relationship)
        if rel is None:
            raise ValueError(
                f"{model.__name__} has no relationship {include.relationship!r}"
            )
        option = selectinload(getattr(model, include.relationship))
        if include.columns is not None:
            target = rel.mapper
            unknown = [c for c in include.columns if c not in target.column_attrs]
            if unknown:
                raise ValueError(
                    f"{target.class_.__name__} has no column(s) {', '.join(unknown)}"
                )
            option = option.load_only(
                *(getattr(target.class_, c) for c in include.columns)
            )
        options.append(option)
    return options
