import os
import pandas as pd

from reconcile.columns import RECONCILED_COLUMNS

def ensure_outdir(outdir):
    os.makedirs(outdir, exist_ok=True)

def reconciled_csv(df):
    """Reconciled table as CSV text with the fixed 17-column header."""
    out = pd.DataFrame(df).reindex(columns=RECONCILED_COLUMNS, fill_value="")
    return out.to_csv(index=False)

def write_outputs_reconciled(df, outdir):
    path = os.path.join(outdir, "reconciled_accounts.csv")
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(reconciled_csv(df))
    return path

def write_outputs_sankey(fig, outdir):
    path = os.path.join(outdir, "sankey_pipeline.html")
    fig.write_html(path)
    return path
