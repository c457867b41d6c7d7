"""Apply identifier rules to pandas DataFrame columns.

Header cells of uploaded files end up as column names in curated tables, so
they go through the same normalization as any other identifier. Two headers
that only differ in case (``Name`` / ``NAME``) collide after folding and are
rejected rather than silently merged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

import pandas as pd

from .naming import Identifier, check_identifier

logger = logging.getLogger(__name__)


def canonical_columns(columns: Iterable[Any]) -> List[Identifier]:
    seen: Dict[Identifier, str] = {}
    out: List[Identifier] = []
    for col in columns:
        label = str(col)
        ident = Identifier.parse(label)
        if ident in seen:
            raise ValueError(
                f"Columns {seen[ident]!r} and {label!r} both normalize to identifier {ident.value!r}"
            )
        seen[ident] = label
        out.append(ident)
    return out


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of ``df`` with canonical column names.

    Raises IdentifierError for an invalid column label and ValueError when two
    labels fold to the same identifier. ``df`` is left untouched.
    """

    idents = canonical_columns(df.columns)
    renamed = [(str(old), new.value) for old, new in zip(df.columns, idents) if str(old) != new.value]
    for old, new in renamed:
        logger.debug("Renamed column %r -> %r", old, new, extra={"identifier": new})

    out = df.copy()
    out.columns = [i.value for i in idents]
    return out


def invalid_columns(df: pd.DataFrame) -> Dict[str, str]:
    """Map each invalid column label to the rule it breaks."""

    bad: Dict[str, str] = {}
    for col in df.columns:
        label = str(col)
        err = check_identifier(label)
        if err is not None:
            bad[label] = err.reason
    return bad
