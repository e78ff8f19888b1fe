"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from ledgerfx.application.use_cases.build_accounting_state import (
    AccountingState,
)
from ledgerfx.application.use_cases.get_monthly_net_worth import (
    GetMonthlyNetWorthUseCase,
    MonthlyNetWorthPoint,
)
from ledgerfx.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
    NetWorthSummary,
)
from ledgerfx.domain.constants import ACCOUNT_SEPARATOR
from ledgerfx.domain.errors import PricesError
from ledgerfx.domain.models.reports import TreeBalanceNode
from ledgerfx.infrastructure.container import (
    build_accounting_state_use_case,
    build_settings,
)
from ledgerfx.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from ledgerfx.infrastructure.settings import LedgerSettings


def _fetch_accounting_state() -> AccountingState:
    """Run the ledger pipeline with settings from the environment."""
    return build_accounting_state_use_case(settings=build_settings()).execute()


@st.cache_data(show_spinner=False)
def _load_accounting_state(schema_version: int = 1) -> AccountingState:
    """Cached wrapper around _fetch_accounting_state."""
    _ = schema_version
    return _fetch_accounting_state()


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = "€" if currency_code == "EUR" else currency_code
    return f"{value:,.2f} {symbol}"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _prepare_monthly_chart_data(
    points: Sequence[MonthlyNetWorthPoint],
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows for the monthly net worth chart."""
    return [
        {
            "month": point.as_of.isoformat(),
            "net_worth": float(point.net_worth),
            "net_worth_label": _format_currency(
                point.net_worth,
                point.currency_code,
            ),
        }
        for point in points
    ]


def _prepare_tree_rows(tree: TreeBalanceNode) -> list[dict[str, str]]:
    """Flatten the balance tree into indented table rows."""
    rows = []
    for path, depth, node in tree.walk():
        name = path.rsplit(ACCOUNT_SEPARATOR, 1)[-1]
        rows.append(
            {
                "Account": f"{'    ' * depth}{name}",
                "Path": path,
                "Balance": ", ".join(
                    f"{amount.quantity:,} {amount.commodity_name}"
                    for amount in node.balance.sorted_amounts()
                ),
            }
        )
    return rows


def _render_monthly_chart(points: Sequence[MonthlyNetWorthPoint]) -> None:
    """Render a line chart of month-end net worth."""
    if not points:
        st.info("No monthly net worth available for the chart.")
        return
    data = _prepare_monthly_chart_data(points)
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        point=True,
        color="#1b9aaa",
    ).encode(
        x=alt.X("month:T", title=None),
        y=alt.Y("net_worth:Q", title=None),
        tooltip=[
            alt.Tooltip("month:T"),
            alt.Tooltip("net_worth_label:N"),
        ],
    ).configure_view(
        stroke=None
    )
    st.subheader("Net Worth by Month")
    st.altair_chart(chart, width="stretch")


def _render_net_worth(
    state: AccountingState,
    settings: LedgerSettings,
) -> None:
    """Render the net worth metrics and the monthly chart."""
    logger = get_app_logger()
    currency_code = settings.main_commodity
    try:
        summary: NetWorthSummary = GetNetWorthSummaryUseCase(
            asset_prefixes=settings.asset_prefixes,
            liability_prefixes=settings.liability_prefixes,
            logger=logger,
        ).execute(
            state.balance,
            state.prices,
            date.today(),
            currency_code,
            settings.main_commodity_decimal_points,
        )
    except PricesError as exc:
        logger.error(f"Net worth valuation failed: {exc.message}")
        st.error(f"Cannot value net worth: {exc.message}")
        return
    points = GetMonthlyNetWorthUseCase(
        asset_prefixes=settings.asset_prefixes,
        liability_prefixes=settings.liability_prefixes,
        logger=logger,
    ).execute(
        state.monthly_report,
        state.prices,
        currency_code,
        settings.main_commodity_decimal_points,
    )
    net_worth_delta = (
        _format_delta(points[-1].net_worth - points[-2].net_worth)
        if len(points) > 1
        else None
    )

    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric(
        "Assets",
        _format_currency(summary.asset_total, currency_code),
    )
    liabilities_col.metric(
        "Liabilities",
        _format_currency(summary.liability_total, currency_code),
    )
    net_worth_col.metric(
        "Net Worth",
        _format_currency(summary.net_worth, currency_code),
        net_worth_delta,
    )
    _render_monthly_chart(points)


def _render_accounts(state: AccountingState) -> None:
    """Render the balance tree with a name filter."""
    st.subheader("Accounts")
    query = st.text_input("Search by path", placeholder="Type to filter")
    rows = _prepare_tree_rows(state.tree)
    query_lower = query.strip().lower()
    if query_lower:
        rows = [row for row in rows if query_lower in row["Path"].lower()]
    st.caption(f"{len(rows)} accounts shown")
    st.dataframe(rows, width="stretch", hide_index=True, height=520)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger FX Dashboard", layout="wide")
    st.title("Ledger FX Dashboard")

    page = st.sidebar.selectbox("Page", ["Net Worth", "Accounts"])
    get_usage_logger().info(f"page_view page={page}")

    settings = build_settings()
    try:
        state = _load_accounting_state(schema_version=1)
    except PricesError as exc:
        get_app_logger().error(f"Ledger pipeline failed: {exc.message}")
        st.error(f"Cannot load the ledger: {exc.message}")
        return

    if not state.ledger.transactions:
        st.warning("No transactions found in the ledger.")
        return
    if page == "Net Worth":
        _render_net_worth(state, settings)
    else:
        _render_accounts(state)


if __name__ == "__main__":  # pragma: no cover
    main()
