# app.py
"""
Outreach Pipeline Reconciler
----------------------------
Usage example:
 python app.py --data-dir data/ --out out/
 python app.py --accounts data/master_list_hubspot.csv --calls data/nooks.csv --out out/ --sankey
"""
import argparse
import logging

from reconcile.join import reconcile
from reconcile.stats import ROLES, dataset_stats
from reconcile.diagnostics import unmatched_keys, suggest_matches
from flow.aggregate import build_flow_graph
from flow.graph import node_throughput
from flow.sankey import build_sankey_figure
from io_utils.readers import load_datasets
from io_utils.writers import (
    write_outputs_reconciled,
    write_outputs_sankey,
    ensure_outdir,
)

def main(argv=None):
    parser = argparse.ArgumentParser(description="Outreach Pipeline Reconciler")
    parser.add_argument("--data-dir", type=str, required=False, help="Folder holding the default CSV exports")
    parser.add_argument("--accounts", type=str, required=False, help="Path to the master account list CSV")
    parser.add_argument("--calls", type=str, required=False, help="Path to the call activity CSV")
    parser.add_argument("--emails", type=str, required=False, help="Path to the email activity CSV")
    parser.add_argument("--web-visits", type=str, required=False, help="Path to the web visit CSV")
    parser.add_argument("--out", type=str, required=True, help="Output directory")
    parser.add_argument("--sankey", action="store_true", help="Also write the Sankey diagram as HTML")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    ensure_outdir(args.out)
# ---- Load ----
    tables = load_datasets(
        args.data_dir,
        accounts=args.accounts,
        calls=args.calls,
        emails=args.emails,
        web_visits=args.web_visits,
    )
    if tables["accounts"] is None:
        print("⚠️ No accounts dataset provided; nothing to reconcile.")
    for role in ROLES:
        stats = dataset_stats(role, tables[role])
        if stats:
            print(f"📊 {role}: " + ", ".join(f"{label} {value}" for label, value in stats))
# ---- Reconcile ----
    reconciled = reconcile(tables["accounts"], tables["calls"], tables["emails"], tables["web_visits"])
    path = write_outputs_reconciled(reconciled, outdir=args.out)
    print(f"✅ Reconciled {len(reconciled)} accounts. Output written to {path}.")
# ---- Join diagnostics ----
    account_names = reconciled["Company Name"].tolist()
    for role in ROLES[1:]:
        missing = unmatched_keys(tables["accounts"], tables[role])
        if not missing:
            continue
        print(f"🔎 {role}: {len(missing)} companies with no account match")
        suggestions = suggest_matches(missing, account_names)
        for row in suggestions.itertuples(index=False):
            print(f"   {row.company_name!r} looks like {row.suggestion!r} ({row.score})")
# ---- Flow graph ----
    graph = build_flow_graph(reconciled)
    if graph is None:
        print("ℹ️ No flow graph (no reconciled rows).")
    else:
        t = graph.totals
        print(
            f"🔀 Flow: {t.connects} connects → {t.conversations} conversations ({t.conversation_rate}%)"
            f" → {t.meetings} meetings ({t.meeting_rate}%) → {t.applications} applications ({t.application_rate}%)"
        )
        for anomaly in graph.anomalies:
            print(f"⚠️ {anomaly.describe()}")
        logging.getLogger(__name__).debug("Node throughput:\n%s", node_throughput(graph).to_string(index=False))
        if args.sankey:
            html = write_outputs_sankey(build_sankey_figure(graph), outdir=args.out)
            print(f"✅ Sankey written to {html}.")
    print("🎉 Done.")

if __name__ == "__main__":
    main()
