import os
import pandas as pd

# Default export file per dataset role
DEFAULT_FILES = {
    "accounts": "master_list_hubspot.csv",
    "calls": "nooks.csv",
    "emails": "instantly.csv",
    "web_visits": "unify.csv",
}

def clean_columns(df):
    df.columns = df.columns.str.strip()
    return df

def load_table(path):
    """Read a CSV with every cell kept as text ('' for blanks)."""
    if path is None:
        return None
    df = pd.read_csv(path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    return clean_columns(df)

def load_datasets(data_dir=None, **paths):
    """
    Load the four datasets. Explicit paths win; otherwise the default file
    name inside `data_dir` is used when it exists. Missing datasets are None.
    """
    tables = {}
    for role, filename in DEFAULT_FILES.items():
        path = paths.get(role)
        if path is None and data_dir:
            candidate = os.path.join(data_dir, filename)
            path = candidate if os.path.exists(candidate) else None
        tables[role] = load_table(path)
    return tables
