"""
Streamlit Frontend for Personal Ledger

A point-and-click alternative to the console menu. It offers the same
operations and keeps one ledger per browser session.

DESIGN PRINCIPLES:
1. Every button maps to exactly one ledger operation
2. The outcome shown is the ledger's own result message
3. Nothing is saved to disk without an explicit "Save" action
"""

from datetime import date

import streamlit as st

from src.audit import create_correlation_id
from src.config import get_settings
from src.ledger import Ledger
from src.models.transaction import LedgerOutcome, LedgerResult
from src.orchestrator import create_app_components
from src.services.storage import TransactionStorageInterface


# Page configuration
st.set_page_config(
    page_title="Personal Ledger",
    page_icon="💰",
    layout="centered",
    initial_sidebar_state="expanded",
)


def get_components() -> tuple[Ledger, TransactionStorageInterface]:
    """Get or create this session's ledger and storage."""
    if "ledger" not in st.session_state:
        ledger, storage, audit_logger = create_app_components(use_file_storage=True)
        st.session_state.ledger = ledger
        st.session_state.storage = storage
        st.session_state.audit_logger = audit_logger
    return st.session_state.ledger, st.session_state.storage


def show_result(result: LedgerResult) -> None:
    """Render a ledger result with a colour matching its outcome."""
    if result.outcome == LedgerOutcome.OK:
        if result.message:
            st.success(result.message)
    elif result.outcome == LedgerOutcome.EMPTY_RESULT:
        st.info(result.message)
    elif result.outcome == LedgerOutcome.INVALID_AMOUNT:
        st.warning(result.message)
    else:
        st.error(result.message)


def finish_action(result: LedgerResult) -> None:
    """
    Keep the result for the next run and rerun the page.

    Balances are drawn before the buttons, so a mutating action must
    rerun the script to show the new balance.
    """
    st.session_state.last_result = result
    st.rerun()


def show_last_result() -> None:
    result = st.session_state.pop("last_result", None)
    if result is not None:
        show_result(result)


def show_transactions(result: LedgerResult) -> None:
    if result.description:
        st.subheader(result.description)
    if not result.data_found:
        show_result(result)
        return
    st.dataframe(
        [
            {
                "Amount": t.amount,
                "Date": t.date.isoformat(),
                "Type": "Deposit" if t.is_deposit else "Withdrawal",
            }
            for t in result.transactions
        ],
        use_container_width=True,
    )
    st.caption(f"{result.result_count} transactions")


def main():
    """Main application entry point."""
    ledger, storage = get_components()

    # Sidebar navigation
    st.sidebar.title("💰 Personal Ledger")
    st.sidebar.metric("Balance", ledger.get_balance())
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigate to:",
        ["💵 Deposit / Withdraw", "📜 History", "💾 Save / Load", "⚙️ Settings"],
        index=0,
    )

    if page == "💵 Deposit / Withdraw":
        render_money_page(ledger)
    elif page == "📜 History":
        render_history_page(ledger)
    elif page == "💾 Save / Load":
        render_files_page(ledger, storage)
    elif page == "⚙️ Settings":
        render_settings_page(ledger)


def render_money_page(ledger: Ledger):
    """Render the deposit/withdraw page."""
    st.title("💵 Deposit / Withdraw")
    show_last_result()
    st.markdown(f"Current balance: **{ledger.get_balance()}**")

    amount = st.number_input("Amount", min_value=1, step=1, value=1, key="amount")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("➕ Deposit", type="primary", key="deposit"):
            finish_action(ledger.deposit(int(amount), correlation_id=create_correlation_id()))
    with col2:
        if st.button("➖ Withdraw", key="withdraw"):
            finish_action(ledger.withdraw(int(amount), correlation_id=create_correlation_id()))


def render_history_page(ledger: Ledger):
    """Render the transaction history page."""
    st.title("📜 Transaction History")

    scope = st.selectbox("Show", ["All", "By day", "By month", "By year"])
    today = date.today()

    if scope == "All":
        show_transactions(ledger.list_all_transactions())
    elif scope == "By day":
        on_date = st.date_input("Day", value=today)
        show_transactions(ledger.list_transactions_on_date(on_date))
    elif scope == "By month":
        col1, col2 = st.columns(2)
        with col1:
            year = st.number_input("Year", min_value=1, max_value=9999, step=1, value=today.year)
        with col2:
            month = st.selectbox("Month", list(range(1, 13)), index=today.month - 1)
        show_transactions(ledger.list_transactions_in_month(int(year), int(month)))
    elif scope == "By year":
        year = st.number_input("Year", min_value=1, max_value=9999, step=1, value=today.year)
        show_transactions(ledger.list_transactions_in_year(int(year)))


def render_files_page(ledger: Ledger, storage: TransactionStorageInterface):
    """Render the save/load page."""
    st.title("💾 Save / Load")
    show_last_result()
    if not ledger.is_consistent:
        st.warning(
            f"The balance ({ledger.get_balance()}) does not match the "
            f"loaded history ({ledger.history_total()}). Loading never "
            "changes the balance."
        )

    settings = get_settings().ledger

    filename = st.text_input(
        "File name",
        value=settings.default_filename,
        help=f"Relative names are stored under {settings.data_dir}",
        key="filename",
    ).strip()

    col1, col2 = st.columns(2)
    with col1:
        if st.button("💾 Save", type="primary", disabled=not filename, key="save"):
            finish_action(ledger.save_to(storage, filename, correlation_id=create_correlation_id()))
    with col2:
        if st.button("📂 Load", disabled=not filename, key="load"):
            finish_action(ledger.load_from(storage, filename, correlation_id=create_correlation_id()))


def render_settings_page(ledger: Ledger):
    """Render the settings page."""
    st.title("⚙️ Settings")

    from src.config import validate_all_settings

    status = validate_all_settings()
    for name, key in [("Ledger", "ledger"), ("Application", "app")]:
        if status.get(key, False):
            st.success(f"✅ {name} settings loaded")
        else:
            st.error(f"❌ {name} - {status.get(f'{key}_error', 'Not configured')}")

    settings = get_settings().ledger
    st.markdown("### Configuration")
    st.markdown(f"- **Customer:** {ledger.customer_id}")
    st.markdown(f"- **Data directory:** `{settings.data_dir}`")
    st.markdown(f"- **Date format:** `{settings.date_format}`")

    audit_logger = st.session_state.get("audit_logger")
    if audit_logger and audit_logger.events:
        with st.expander("🧾 Audit trail"):
            for event in reversed(audit_logger.events[-50:]):
                st.markdown(
                    f"`{event.timestamp:%H:%M:%S}` **{event.event_type.value}** "
                    f"{event.description}"
                )


if __name__ == "__main__":
    main()
