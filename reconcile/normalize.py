# reconcile/normalize.py
import re
from decimal import Decimal, InvalidOperation, ROUND_DOWN, ROUND_HALF_UP, localcontext
import pandas as pd

# --------- helpers ---------
_THOUSANDS = re.compile(r"(?<=\d),(?=\d{3}\b)")
_ONE_DECIMAL = Decimal("0.1")
_INT64_MAX = 2**63 - 1

def _norm_str(x) -> str:
    return str(x).strip() if isinstance(x, str) else ""

def _to_count(x) -> int:
    """
    Parse a counter cell as a non-negative integer (Python int, no size limit).
      '12' -> 12, ' 1,234 ' -> 1234, '3.7' -> 3
      '', 'n/a', None, '-4', 'inf' -> 0
    """
    if isinstance(x, bool):
        return 0
    if isinstance(x, int):
        return max(x, 0)
    if isinstance(x, float):
        return max(int(x), 0) if pd.notna(x) and abs(x) != float("inf") else 0
    s = _THOUSANDS.sub("", _norm_str(x))
    if not s:
        return 0
    try:
        value = int(s)
    except ValueError:
        try:
            d = Decimal(s)
        except InvalidOperation:
            return 0
        if not d.is_finite():
            return 0
        value = int(d.to_integral_value(rounding=ROUND_DOWN))
    return max(value, 0)

def _percent(num: int, den: int) -> Decimal:
    # half-up on the exact quotient: 1/16 -> 6.3
    num, den = int(num), int(den)
    with localcontext() as ctx:
        ctx.prec = max(28, len(str(num)) + len(str(den)) + 4)
        return (Decimal(num) * 100 / Decimal(den)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)

def format_rate(num: int, den: int) -> str:
    """
    Percentage with one decimal and a '%' suffix: (4, 10) -> '40.0%'.
    A zero denominator gives exactly '0%'.
    """
    if den == 0:
        return "0%"
    return f"{_percent(num, den)}%"

def pct(num: int, den: int) -> float:
    if den == 0:
        return 0.0
    return float(_percent(num, den))

# --------- FRAMES ---------
def as_frame(records) -> pd.DataFrame:
    """
    Accept a DataFrame, a list of dicts or None and return a DataFrame of
    string cells. Missing cells become ''.
    """
    if records is None:
        return pd.DataFrame()
    df = records.copy() if isinstance(records, pd.DataFrame) else pd.DataFrame(list(records))
    if df.empty:
        return df.reset_index(drop=True)
    df = df.fillna("").astype(str)
    return df.reset_index(drop=True)

def ensure_columns(df: pd.DataFrame, columns, default="") -> pd.DataFrame:
    for col in columns:
        if col not in df.columns:
            df[col] = default
    return df

def count_column(df: pd.DataFrame, col: str) -> pd.Series:
    """
    Counter column parsed to Python ints; an absent column is all zeros.
    Values past the int64 range keep object dtype instead of overflowing.
    """
    if col not in df.columns:
        return pd.Series(0, index=df.index, dtype="int64")
    values = [_to_count(v) for v in df[col]]
    if values and max(values) > _INT64_MAX:
        return pd.Series(values, index=df.index, dtype=object)
    return pd.Series(values, index=df.index, dtype="int64")
