import pandas as pd


def last_record_wins(df, key):
    """
    Index a secondary record set by its join key. When the key repeats, the
    last record survives. Rows are left as-is otherwise.
    """
    if df is None or len(df) == 0:
        return pd.DataFrame(columns=[key]).set_index(key)

    records = df.copy()
    if key not in records.columns:
        records[key] = ""

    master = records.drop_duplicates(subset=key, keep="last")
    return master.set_index(key)


def pick_matches(lookup, keys):
    """
    Align the surviving records with `keys` (accounts order). Misses come
    back as all-empty rows so every account gets exactly one match row.
    """
    matched = lookup.reindex(pd.Index(list(keys)))
    matched = matched.fillna("")
    matched["_matched"] = pd.Index(list(keys)).isin(lookup.index)
    return matched.reset_index(drop=True)
