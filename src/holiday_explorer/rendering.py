from __future__ import annotations

from typing import Iterable, List

from .cards import HolidayCard, build_cards
from .controller import STATUS_FAILURE, STATUS_LOADING, STATUS_SUCCESS, QueryState
from .errors import MSG_NO_HOLIDAYS
from .models import MonthGroup

LOADING_TEXT = "Loading..."


def tag_labels(card: HolidayCard) -> List[str]:
    scope = f"Applies to: {card.scope_tag}" if card.regions else card.scope_tag
    tags = [card.type_tag, scope]
    if card.since_tag:
        tags.append(card.since_tag)
    return tags


def render_card_text(card: HolidayCard) -> str:
    lines = [card.title, f"Date: {card.date_line}"]
    if card.local_name_line:
        lines.append(f"Local name: {card.local_name_line}")
    lines.append(" ".join(f"[{t}]" for t in tag_labels(card)))
    lines.append(card.description)
    return "\n".join(lines)


def render_groups_text(groups: Iterable[MonthGroup]) -> str:
    groups = list(groups)
    if not groups:
        return MSG_NO_HOLIDAYS

    blocks = []
    for group in groups:
        cards = "\n\n".join(render_card_text(c) for c in build_cards(group))
        blocks.append(f"{group.header}\n\n{cards}")
    return "\n\n".join(blocks)


def render_state_text(state: QueryState) -> str:
    if state.status == STATUS_LOADING:
        return LOADING_TEXT
    if state.status == STATUS_FAILURE:
        return state.message or ""
    if state.status == STATUS_SUCCESS:
        return render_groups_text(state.groups)
    return ""
