# reconcile/join.py
import time
import logging
import pandas as pd

from merge.survivorship import last_record_wins, pick_matches
from reconcile.columns import (
    ACCOUNT_COLUMNS,
    CALL_COUNTERS,
    COL_COMPANY,
    COL_CONNECTS,
    COL_CONNECT_RATE,
    COL_DIALS,
    COL_LAST_VISIT,
    COL_LAST_VISIT_SRC,
    COL_MEETINGS,
    COL_MEETING_RATE,
    COL_PAGES_VISITED,
    EMAIL_FIELDS,
    RECONCILED_COLUMNS,
)
from reconcile.normalize import as_frame, count_column, ensure_columns, format_rate

logger = logging.getLogger(__name__)


def reconcile(accounts, calls=None, emails=None, web_visits=None) -> pd.DataFrame:
    """
    Join the master account list against the call, email and web-visit logs
    on Company Name.

    - One output row per account, in account order (nothing dropped or added)
    - Secondary sets: last record per company wins
    - Unmatched or unparsable counters become 0, missing text becomes ''
    - Connect/Meeting Rate are connects/dials and meetings/dials ('0%' with no dials)

    Returns a DataFrame with the 17 reconciled columns first, then any other
    account columns.
    """
    start = time.time()
    acc = as_frame(accounts)
    if acc.empty:
        return pd.DataFrame(columns=RECONCILED_COLUMNS)

    acc = ensure_columns(acc, ACCOUNT_COLUMNS)
    keys = acc[COL_COMPANY]

    call_rows = pick_matches(last_record_wins(as_frame(calls), COL_COMPANY), keys)
    email_rows = pick_matches(last_record_wins(as_frame(emails), COL_COMPANY), keys)
    visit_rows = pick_matches(last_record_wins(as_frame(web_visits), COL_COMPANY), keys)

    out = acc[ACCOUNT_COLUMNS].copy()

    # ---- Calls ----
    counts = {col: count_column(call_rows, col) for col in CALL_COUNTERS}
    dials = counts[COL_DIALS]
    out[COL_DIALS] = dials.astype(str)
    out[COL_CONNECTS] = counts[COL_CONNECTS].astype(str)
    out[COL_CONNECT_RATE] = [format_rate(c, d) for c, d in zip(counts[COL_CONNECTS], dials)]
    for col in CALL_COUNTERS[2:]:
        out[col] = counts[col].astype(str)
    out[COL_MEETING_RATE] = [format_rate(m, d) for m, d in zip(counts[COL_MEETINGS], dials)]

    # ---- Emails ----
    for src, dst in EMAIL_FIELDS.items():
        out[dst] = count_column(email_rows, src).astype(str)

    # ---- Web visits ----
    visit_rows = ensure_columns(visit_rows, [COL_LAST_VISIT_SRC])
    out[COL_LAST_VISIT] = visit_rows[COL_LAST_VISIT_SRC].astype(str).values
    out[COL_PAGES_VISITED] = count_column(visit_rows, COL_PAGES_VISITED).astype(str)

    out = out[RECONCILED_COLUMNS]
    extras = [c for c in acc.columns if c not in RECONCILED_COLUMNS]
    if extras:
        out = pd.concat([out, acc[extras]], axis=1)

    logger.info(
        "[reconcile] time: %.2fs, rows: %d, matched calls/emails/visits: %d/%d/%d",
        time.time() - start,
        len(out),
        int(call_rows["_matched"].sum()),
        int(email_rows["_matched"].sum()),
        int(visit_rows["_matched"].sum()),
    )
    return out.reset_index(drop=True)
