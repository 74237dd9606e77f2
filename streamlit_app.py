"""
streamlit_app.py
----------------
Dashboard for the Personal Finance Analyzer.

- starts on the built-in sample transactions
- upload a CSV (date, description, amount, category) to replace them
- summary cards + spending by category chart + transaction table

Run with:  streamlit run streamlit_app.py
"""

from __future__ import annotations
import altair as alt
import streamlit as st

from analyzer.aggregate import chart_frame, transactions_frame
from analyzer.logging_setup import configure_logging
from analyzer.session import AnalyzerSession

configure_logging()

st.set_page_config(page_title="Personal Finance Analyzer", layout="wide")

st.title("Personal Finance Analyzer")
st.caption("Track and visualize your spending")

if "session" not in st.session_state:
    st.session_state["session"] = AnalyzerSession()
if "last_upload" not in st.session_state:
    st.session_state["last_upload"] = None

session: AnalyzerSession = st.session_state["session"]

# ---- Sidebar inputs
st.sidebar.header("Data")
uploaded_csv = st.sidebar.file_uploader(
    "Upload transactions CSV (date, description, amount, category)", type=["csv"]
)
st.sidebar.markdown("---")
sample_btn = st.sidebar.button("Use sample data")

# Streamlit reruns the whole script on every interaction; only ingest a
# file the first time we see it. file_id changes on every new upload, even
# for a file with the same name and size.
if uploaded_csv is not None:
    upload_key = (uploaded_csv.file_id, uploaded_csv.name, uploaded_csv.size)
    if upload_key != st.session_state["last_upload"]:
        st.session_state["last_upload"] = upload_key
        session.upload(uploaded_csv.getvalue(), uploaded_csv.name)

if sample_btn:
    session.reset_to_sample()

if session.error:
    st.error(session.error)

batch = session.batch
metrics = session.metrics

if batch.is_sample:
    st.info("Showing sample data. Upload a CSV to analyze your own transactions.")
else:
    st.success(f"Loaded {len(batch)} transactions from {batch.file_name}")
    if batch.skipped:
        st.warning(f"{len(batch.skipped)} rows were skipped because they were incomplete or invalid.")

# ---- Summary cards
col1, col2, col3, col4 = st.columns(4)
col1.metric("Total spent", f"${metrics.total_spent:,.2f}")
col2.metric("Transactions", metrics.transaction_count)
col3.metric("Average transaction", f"${metrics.average_transaction:,.2f}")
col4.metric("Top category", metrics.top_category, f"${metrics.top_category_amount:,.2f}", delta_color="off")

# ---- Category chart + table
left, right = st.columns([1, 1], gap="large")

with left:
    st.subheader("Spending by category")
    chart = (
        alt.Chart(chart_frame(metrics))
        .mark_bar()
        .encode(
            x=alt.X("name:N", sort=None, title="Category"),
            y=alt.Y("value:Q", title="Amount"),
            tooltip=["name", alt.Tooltip("value:Q", format=",.2f")],
        )
        .properties(height=320)
    )
    st.altair_chart(chart, use_container_width=True)

with right:
    st.subheader("Recent Transactions")
    table = transactions_frame(batch)
    table["amount"] = table["amount"].map(lambda x: f"{x:.2f}")
    st.dataframe(table, use_container_width=True, hide_index=True, height=360)
