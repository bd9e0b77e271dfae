from __future__ import annotations

import html
from datetime import date
from pathlib import Path
from typing import List, Optional

from ..cards import build_cards
from ..controller import QueryState
from ..date_format import month_name
from ..errors import MSG_NO_HOLIDAYS

REPORT_FILENAME = "public_holiday_report.md"


def fmt_date(d: date) -> str:
    return d.strftime("%d %b %Y")


def _md_escape(value: str) -> str:
    # API text must not inject HTML into the rendered report
    return html.escape(value, quote=False).replace("|", "\\|")


def _md_table(headers: List[str], rows: List[List[str]]) -> str:
    out = []
    out.append("| " + " | ".join(headers) + " |")
    out.append("| " + " | ".join(["---"] * len(headers)) + " |")
    for r in rows:
        out.append("| " + " | ".join(_md_escape(c) for c in r) + " |")
    return "\n".join(out)


def _period_label(state: QueryState) -> str:
    if state.month:
        return f"{month_name(state.month)} {state.year}"
    return f"{state.year} (all months)"


def render_holiday_report(state: QueryState, prepared_on: Optional[date] = None) -> str:
    """
    Markdown report for a completed search.

    One summary table, then one section per month listing every holiday.
    """
    prepared_on = prepared_on or date.today()

    holidays = [h for g in state.groups for h in g.holidays]
    nationwide = sum(1 for h in holidays if h.is_nationwide)

    md_parts = [
        f"# Public Holidays: {_md_escape(state.country_code or '-')}",
        "",
        f"- **Country:** {_md_escape(state.country_code or '-')}",
        f"- **Period:** {_period_label(state)}",
        f"- **Prepared:** {fmt_date(prepared_on)}",
        "- **Source:** Nager.Date public holiday API",
        "",
        "## Summary",
        "",
        _md_table(
            ["Metric", "Count"],
            [
                ["Public holidays", str(len(holidays))],
                ["Nationwide", str(nationwide)],
                ["Regional", str(len(holidays) - nationwide)],
                ["Months covered", str(len(state.groups))],
            ],
        ),
        "",
    ]

    if not state.groups:
        md_parts += [MSG_NO_HOLIDAYS, ""]
        return "\n".join(md_parts).strip() + "\n"

    for group in state.groups:
        rows = []
        for card in build_cards(group):
            rows.append([
                card.date_line,
                card.title,
                card.local_name_line or "—",
                card.type_tag,
                card.scope_tag,
                card.since_tag or "—",
            ])
        md_parts += [
            f"## {group.header}",
            "",
            _md_table(["Date", "Name", "Local name", "Type", "Scope", "Since"], rows),
            "",
        ]

    return "\n".join(md_parts).strip() + "\n"


def write_report_markdown(md: str, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / REPORT_FILENAME
    out_path.write_text(md, encoding="utf-8")
    return out_path


def generate_holiday_report(
    state: QueryState,
    output_dir: Path,
    *,
    prepared_on: Optional[date] = None,
) -> Path:
    md = render_holiday_report(state, prepared_on=prepared_on)
    return write_report_markdown(md, output_dir)
