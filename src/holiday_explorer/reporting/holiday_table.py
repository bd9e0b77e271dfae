from __future__ import annotations

from typing import Iterable

import pandas as pd

from ..cards import build_card
from ..models import MonthGroup

COLUMNS = ["month", "date", "name", "local_name", "types", "scope", "since"]


def holidays_to_frame(groups: Iterable[MonthGroup]) -> pd.DataFrame:
    """
    Flatten month groups into one row per holiday, keeping group order.
    """
    rows = []
    for group in groups:
        for h in group.holidays:
            card = build_card(h)
            rows.append({
                "month": group.month_name,
                "date": h.date,
                "name": card.title,
                "local_name": h.local_name or "",
                "types": card.type_tag,
                "scope": card.scope_tag,
                "since": h.launch_year,
            })

    df = pd.DataFrame(rows, columns=COLUMNS)
    df["since"] = df["since"].astype("Int64")
    return df
