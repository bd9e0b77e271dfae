"""
Command-line entry point.

Behaviour:
- Runs the same search as the Streamlit page for one country/year/month
- Prints the month-grouped holiday cards to stdout
- Optionally writes the Markdown + HTML report and a CSV table

Example:
    python -m src.holiday_explorer.run --country DE --year 2024 --month 12 --report-dir outputs/de_2024
"""

from __future__ import annotations

from argparse import ArgumentParser
from datetime import date
from pathlib import Path
from typing import List, Optional

from .config import load_settings
from .controller import STATUS_SUCCESS, HolidayQueryController
from .logging_config import setup_logging
from .nager_client import NagerDateClient
from .rendering import render_state_text
from .reporting.holiday_report_md import generate_holiday_report
from .reporting.holiday_table import holidays_to_frame
from .reporting.html_builder import build_html_report

MONTH_CHOICES = ["all"] + [str(m) for m in range(1, 13)]


def create_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="holiday_explorer",
        description="List public holidays for a country and year, grouped by month",
    )
    parser.add_argument("--country", default="", help="ISO 3166-1 alpha-2 code, e.g. DE")
    parser.add_argument("--year", default=str(date.today().year), help="4-digit year")
    parser.add_argument("--month", default="all", choices=MONTH_CHOICES, help="month filter")
    parser.add_argument("--report-dir", type=Path, default=None, help="write Markdown/HTML reports here")
    parser.add_argument("--csv", type=Path, default=None, help="write the holiday table as CSV")
    parser.add_argument("--list-countries", action="store_true", help="print available countries and exit")
    return parser


def main(argv: Optional[List[str]] = None, controller: Optional[HolidayQueryController] = None) -> int:
    args = create_arg_parser().parse_args(argv)

    settings = load_settings()
    setup_logging(settings.log_level)

    controller = controller or HolidayQueryController(
        NagerDateClient(settings.api_base, timeout=settings.timeout)
    )

    if args.list_countries:
        options = controller.list_countries()
        for opt in options:
            if opt.value:
                print(f"{opt.value}\t{opt.label}")
            elif opt.disabled:
                print(opt.label)
                return 1
        return 0

    state = controller.search(args.country, args.year, args.month)
    print(render_state_text(state))

    if state.status != STATUS_SUCCESS:
        return 1

    if args.report_dir is not None:
        md_path = generate_holiday_report(state, args.report_dir)
        html_path = build_html_report(
            md_path,
            args.report_dir,
            title=f"Public Holidays {state.country_code} {state.year}",
        )
        print(f"Wrote Markdown report to: {md_path}")
        print(f"Wrote HTML report to: {html_path}")

    if args.csv is not None:
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        holidays_to_frame(state.groups).to_csv(args.csv, index=False)
        print(f"Wrote CSV table to: {args.csv}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
