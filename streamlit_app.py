import streamlit as st
import pandas as pd
import time
import logging

# Suppress tornado WebSocketClosedError logs
logging.getLogger("tornado.application").setLevel(logging.ERROR)

from reconcile.join import reconcile
from reconcile.stats import dataset_stats
from reconcile.diagnostics import unmatched_keys, suggest_matches
from flow.aggregate import build_flow_graph
from flow.sankey import build_sankey_figure, BASE_HEIGHT
from io_utils.readers import DEFAULT_FILES, clean_columns, load_datasets
from io_utils.writers import reconciled_csv

DATASETS = {
    "accounts": "Master List of Accounts",
    "calls": "Nooks",
    "emails": "Instantly",
    "web_visits": "Unify",
}

st.set_page_config(layout="wide", page_title="ICP Development")
st.title("📈 ICP Development")

st.sidebar.header("📁 Upload Your Own CSV Files")
st.sidebar.caption("Replace the sample data with your own CSV files.")
uploads = {role: st.sidebar.file_uploader(f"Upload {label} CSV", type=["csv"]) for role, label in DATASETS.items()}
data_dir = st.sidebar.text_input("Sample data folder", value="data")

def load_uploaded_csv(uploaded_file, label):
    if uploaded_file:
        try:
            df = pd.read_csv(uploaded_file, dtype=str, keep_default_na=False)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            st.error(f"❌ Could not read {label}: {e}")
            return None
        return clean_columns(df)
    return None

def show_stats(stats):
    if not stats:
        return
    cols = st.columns(len(stats))
    for col, (label, value) in zip(cols, stats):
        col.metric(label, value)

# ---- Load ----
load_start = time.time()
tables = load_datasets(data_dir)
for role, label in DATASETS.items():
    uploaded = load_uploaded_csv(uploads[role], label)
    if uploaded is not None:
        tables[role] = uploaded

if all(df is None for df in tables.values()):
    st.info(f"Upload CSVs in the sidebar or put {', '.join(DEFAULT_FILES.values())} in the data folder.")
    st.stop()

st.caption(f"⏱️ Data loading took {time.time() - load_start:.2f} seconds")

# ---- Datasets ----
st.subheader("🏢 Master List of Accounts")
if tables["accounts"] is not None:
    st.dataframe(tables["accounts"])
    show_stats(dataset_stats("accounts", tables["accounts"]))
else:
    st.warning("⚠️ No accounts dataset loaded.")

st.subheader("📞 Outreach Platforms")
cols = st.columns(3)
for col, role in zip(cols, ["calls", "emails", "web_visits"]):
    with col:
        st.markdown(f"**{DATASETS[role]}**")
        if tables[role] is None:
            st.write("No data available")
            continue
        st.dataframe(tables[role])
        show_stats(dataset_stats(role, tables[role]))

# ---- Reconcile ----
reconciled = reconcile(tables["accounts"], tables["calls"], tables["emails"], tables["web_visits"])

st.subheader(f"🔗 Reconciled Accounts ({len(reconciled)})")
search = st.text_input("🔍 Filter by company name")
shown = reconciled
if search:
    shown = reconciled[reconciled["Company Name"].str.contains(search, case=False, regex=False)]
st.dataframe(shown)
st.download_button(
    label="⬇️ Download Reconciled CSV",
    data=reconciled_csv(reconciled),
    file_name="reconciled_accounts.csv",
    mime="text/csv",
)

with st.expander("🔽 Unmatched companies in outreach data"):
    account_names = reconciled["Company Name"].tolist()
    for role in ["calls", "emails", "web_visits"]:
        missing = unmatched_keys(tables["accounts"], tables[role])
        st.markdown(f"**{DATASETS[role]}**: {len(missing)} unmatched")
        if missing:
            suggestions = suggest_matches(missing, account_names)
            if not suggestions.empty:
                st.dataframe(suggestions)

# ---- Sankey ----
st.subheader("🔀 Pipeline Flow")
graph = build_flow_graph(reconciled)
if graph is None:
    st.write("No data available for Sankey diagram.")
else:
    for anomaly in graph.anomalies:
        st.warning(f"⚠️ {anomaly.describe()}")
    zoom = st.slider("Zoom", min_value=0.2, max_value=3.0, value=1.0, step=0.2)
    fig = build_sankey_figure(graph, height=round(BASE_HEIGHT * zoom))
    st.plotly_chart(fig, use_container_width=True)
