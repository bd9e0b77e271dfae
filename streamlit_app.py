from datetime import date

import streamlit as st

from src.holiday_explorer.cards import build_cards
from src.holiday_explorer.config import load_settings
from src.holiday_explorer.controller import STATUS_FAILURE, STATUS_SUCCESS, HolidayQueryController
from src.holiday_explorer.date_format import month_name
from src.holiday_explorer.errors import MSG_NO_HOLIDAYS
from src.holiday_explorer.logging_config import setup_logging
from src.holiday_explorer.nager_client import NagerDateClient
from src.holiday_explorer.rendering import tag_labels
from src.holiday_explorer.reporting.holiday_report_md import render_holiday_report
from src.holiday_explorer.reporting.holiday_table import holidays_to_frame
from src.holiday_explorer.reporting.html_builder import markdown_to_html

settings = load_settings()
setup_logging(settings.log_level)

st.set_page_config(page_title="Public Holidays by Country", page_icon="📅", layout="wide")

st.title("📅 Public Holidays by Country")
st.caption(
    "Pick a country and a year. The app loads the public holidays from Nager.Date "
    "and lists them month by month."
)

# One controller per browser session so its request token survives reruns
if "controller" not in st.session_state:
    st.session_state.controller = HolidayQueryController(
        NagerDateClient(settings.api_base, timeout=settings.timeout)
    )
    st.session_state.country_options = st.session_state.controller.list_countries()

controller: HolidayQueryController = st.session_state.controller
country_options = st.session_state.country_options

countries_unavailable = len(country_options) == 1 and country_options[0].disabled

with st.form("search"):
    col1, col2, col3 = st.columns([3, 1, 2])
    with col1:
        country = st.selectbox(
            "Country",
            options=country_options,
            format_func=lambda o: o.label,
            disabled=countries_unavailable,
        )
    with col2:
        # Enter in this field submits the form
        year = st.text_input("Year", value=str(date.today().year), max_chars=4)
    with col3:
        month = st.selectbox(
            "Month",
            options=["all"] + [str(m) for m in range(1, 13)],
            format_func=lambda m: "All months" if m == "all" else month_name(int(m)),
        )
    submitted = st.form_submit_button("Search", type="primary")

if submitted:
    with st.spinner("Loading holidays…"):
        controller.search(country.value if country else "", year, month)

state = controller.state

if state.status == STATUS_FAILURE:
    st.error(state.message)

elif state.status == STATUS_SUCCESS:
    if state.empty:
        st.info(MSG_NO_HOLIDAYS)
    else:
        st.metric("Public holidays", state.holiday_count)

        for group in state.groups:
            st.subheader(group.header)
            for card in build_cards(group):
                with st.container(border=True):
                    st.markdown(f"**{card.title}**")
                    st.markdown(f"**Date:** {card.date_line}")
                    if card.local_name_line:
                        st.markdown(f"**Local name:** {card.local_name_line}")
                    st.caption(" · ".join(tag_labels(card)))
                    st.write(card.description)

        st.divider()
        st.header("📦 Export")

        report_md = render_holiday_report(state)
        table = holidays_to_frame(state.groups)
        stem = f"public_holidays_{state.country_code}_{state.year}"

        st.dataframe(table, use_container_width=True)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.download_button(
                "⬇️ Markdown report",
                data=report_md,
                file_name=f"{stem}.md",
                mime="text/markdown",
            )
        with col2:
            st.download_button(
                "⬇️ HTML report",
                data=markdown_to_html(report_md, title=f"Public Holidays {state.country_code} {state.year}"),
                file_name=f"{stem}.html",
                mime="text/html",
            )
        with col3:
            st.download_button(
                "⬇️ CSV table",
                data=table.to_csv(index=False),
                file_name=f"{stem}.csv",
                mime="text/csv",
            )
