# reconcile/stats.py
import pandas as pd

from reconcile.normalize import as_frame, count_column, format_rate

# Dataset roles, in display order
ROLES = ["accounts", "calls", "emails", "web_visits"]


def _total(df: pd.DataFrame, col: str) -> int:
    return sum(count_column(df, col).tolist())


def dataset_stats(role: str, records):
    """
    Summary cards shown under each uploaded dataset.
    Returns a list of (label, value) pairs, or None when there is no data.
    """
    df = as_frame(records)
    if df.empty:
        return None

    if role == "accounts":
        return [("Total Companies", f"{len(df):,}")]

    if role == "calls":
        dials = _total(df, "Dials")
        connects = _total(df, "Connects")
        meetings = _total(df, "Meetings Set")
        return [
            ("Total Dials", f"{dials:,}"),
            ("Total Connects", f"{connects:,}"),
            ("Total Meetings", f"{meetings:,}"),
            ("Avg Connect Rate", format_rate(connects, dials)),
        ]

    if role == "emails":
        sent = _total(df, "Emails Sent")
        opens = _total(df, "Opens")
        clicks = _total(df, "Clicks")
        return [
            ("Total Emails", f"{sent:,}"),
            ("Total Opens", f"{opens:,}"),
            ("Total Clicks", f"{clicks:,}"),
            ("Avg Open Rate", format_rate(opens, sent)),
        ]

    if role == "web_visits":
        return [("Companies Tracked", f"{len(df):,}")]

    raise ValueError(f"Unknown dataset role: {role!r}")
