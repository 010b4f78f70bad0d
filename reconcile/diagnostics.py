# reconcile/diagnostics.py
import re
import time
import logging
import pandas as pd
from rapidfuzz import fuzz

from reconcile.columns import COL_COMPANY
from reconcile.normalize import as_frame

logger = logging.getLogger(__name__)

# --------- helpers ---------
_ALNUM = re.compile(r"[^a-z0-9]+")

def _alnum(s: str) -> str:
    return _ALNUM.sub("", str(s).strip().lower())

def _names(records) -> list[str]:
    df = as_frame(records)
    if df.empty or COL_COMPANY not in df.columns:
        return []
    return df[COL_COMPANY].tolist()

# --------- UNMATCHED ---------
def unmatched_keys(accounts, secondary) -> list[str]:
    """
    Company names in a secondary dataset with no exact match in accounts.
    First-seen order, no repeats. These rows never reach the reconciled table.
    """
    known = set(_names(accounts))
    seen: set[str] = set()
    out = []
    for name in _names(secondary):
        if name in known or name in seen:
            continue
        seen.add(name)
        out.append(name)
    return out

# --------- SUGGESTIONS ---------
def suggest_matches(unmatched, account_names, threshold: int = 90) -> pd.DataFrame:
    """
    Best fuzzy account name for each unmatched key (token_sort_ratio).
      - names with <3 alnum chars are ignored (too short to compare)
      - only candidates sharing the 2-char alnum block are scored
      - scores below `threshold` are dropped
    Returns columns: company_name, suggestion, score
    """
    start = time.time()

    blocks: dict[str, list[str]] = {}
    for name in dict.fromkeys(account_names):
        a = _alnum(name)
        if len(a) < 3:
            continue
        blocks.setdefault(a[:2], []).append(name)

    rows = []
    for name in unmatched:
        a = _alnum(name)
        if len(a) < 3:
            continue
        best, best_score = None, 0.0
        for cand in blocks.get(a[:2], []):
            score = fuzz.token_sort_ratio(str(name).lower(), str(cand).lower())
            if score > best_score:
                best, best_score = cand, score
        if best is not None and best_score >= threshold:
            rows.append({"company_name": name, "suggestion": best, "score": round(best_score, 1)})

    logger.info("[suggest_matches] time: %.2fs, suggestions: %d", time.time() - start, len(rows))
    return pd.DataFrame(rows, columns=["company_name", "suggestion", "score"])
