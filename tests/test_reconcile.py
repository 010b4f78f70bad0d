import pandas as pd

from reconcile.columns import RECONCILED_COLUMNS
from reconcile.join import reconcile
from reconcile.normalize import _to_count, format_rate, pct


def test_acme_row(acme_accounts, acme_calls):
    out = reconcile(acme_accounts, acme_calls)
    row = out.iloc[0]
    assert row["Dials"] == "10"
    assert row["Connects"] == "4"
    assert row["Connect Rate"] == "40.0%"
    assert row["Conversations"] == "3"
    assert row["Meetings Set"] == "2"
    assert row["Meeting Rate"] == "20.0%"
    # no email / web visit data
    assert row["Emails Sent"] == "0"
    assert row["Email Opens"] == "0"
    assert row["Email Clicks"] == "0"
    assert row["Last Website Visit"] == ""
    assert row["Pages Visited"] == "0"
    # missing account columns default to ''
    assert row["Company Size"] == ""
    assert row["Revenue Range"] == ""


def test_columns_in_fixed_order(acme_accounts, acme_calls):
    out = reconcile(acme_accounts, acme_calls)
    assert list(out.columns) == RECONCILED_COLUMNS


def test_extra_account_columns_kept_after_reconciled_ones():
    accounts = pd.DataFrame([{"Company Name": "A", "Owner": "Dana", "Industry": "Staffing"}])
    out = reconcile(accounts)
    assert list(out.columns) == RECONCILED_COLUMNS + ["Owner"]
    assert out.at[0, "Owner"] == "Dana"


def test_length_and_order_preserved_with_misses():
    accounts = pd.DataFrame({"Company Name": ["Zeta", "Alpha", "Missing", "Beta"]})
    calls = pd.DataFrame({
        "Company Name": ["Beta", "Alpha", "Zeta"],
        "Dials": ["5", "4", "3"],
    })
    out = reconcile(accounts, calls)
    assert out["Company Name"].tolist() == ["Zeta", "Alpha", "Missing", "Beta"]
    assert out["Dials"].tolist() == ["3", "4", "0", "5"]


def test_duplicate_accounts_each_get_a_row():
    accounts = pd.DataFrame({"Company Name": ["Acme", "Acme"]})
    calls = pd.DataFrame({"Company Name": ["Acme"], "Dials": ["7"]})
    out = reconcile(accounts, calls)
    assert len(out) == 2
    assert out["Dials"].tolist() == ["7", "7"]


def test_last_secondary_record_wins():
    accounts = pd.DataFrame({"Company Name": ["Acme"]})
    calls = pd.DataFrame({
        "Company Name": ["Acme", "Other", "Acme"],
        "Dials": ["1", "2", "8"],
        "Connects": ["1", "2", "2"],
    })
    out = reconcile(accounts, calls)
    assert out.at[0, "Dials"] == "8"
    assert out.at[0, "Connect Rate"] == "25.0%"


def test_zero_dials_gives_plain_zero_rates():
    accounts = pd.DataFrame({"Company Name": ["A", "B"]})
    calls = pd.DataFrame({"Company Name": ["A"], "Dials": ["0"], "Connects": ["3"], "Meetings Set": ["1"]})
    out = reconcile(accounts, calls)
    assert out["Connect Rate"].tolist() == ["0%", "0%"]
    assert out["Meeting Rate"].tolist() == ["0%", "0%"]


def test_rate_rounds_to_one_decimal():
    accounts = pd.DataFrame({"Company Name": ["A"]})
    calls = pd.DataFrame({"Company Name": ["A"], "Dials": ["3"], "Connects": ["1"], "Meetings Set": ["2"]})
    out = reconcile(accounts, calls)
    assert out.at[0, "Connect Rate"] == "33.3%"
    assert out.at[0, "Meeting Rate"] == "66.7%"


def test_non_numeric_counters_coerce_to_zero():
    accounts = pd.DataFrame({"Company Name": ["A"]})
    calls = pd.DataFrame({"Company Name": ["A"], "Dials": ["n/a"], "Connects": [""], "Conversations": ["3"]})
    out = reconcile(accounts, calls)
    assert out.at[0, "Dials"] == "0"
    assert out.at[0, "Connects"] == "0"
    assert out.at[0, "Conversations"] == "3"
    assert out.at[0, "Meetings Set"] == "0"
    assert out.at[0, "Connect Rate"] == "0%"


def test_email_and_web_visit_fields():
    accounts = pd.DataFrame({"Company Name": ["A"]})
    emails = pd.DataFrame({"Company Name": ["A"], "Emails Sent": ["20"], "Opens": ["9"], "Clicks": ["2"]})
    visits = pd.DataFrame({"Company Name": ["A"], "Date of Last Visit": ["2025-01-14"], "Pages Visited": ["6"]})
    row = reconcile(accounts, emails=emails, web_visits=visits).iloc[0]
    assert (row["Emails Sent"], row["Email Opens"], row["Email Clicks"]) == ("20", "9", "2")
    assert row["Last Website Visit"] == "2025-01-14"
    assert row["Pages Visited"] == "6"


def test_accepts_list_of_dicts(acme_calls):
    out = reconcile([{"Company Name": "Acme", "Industry": "Construction"}], acme_calls.to_dict("records"))
    assert out.at[0, "Connects"] == "4"


def test_empty_accounts():
    out = reconcile(pd.DataFrame(), pd.DataFrame({"Company Name": ["A"], "Dials": ["1"]}))
    assert out.empty
    assert list(out.columns) == RECONCILED_COLUMNS
    assert reconcile(None).empty
    assert reconcile([]).empty


def test_to_count():
    assert _to_count("12") == 12
    assert _to_count(" 1,234 ") == 1234
    assert _to_count("3.7") == 3
    assert _to_count("-4") == 0
    assert _to_count("abc") == 0
    assert _to_count(None) == 0
    assert _to_count(float("nan")) == 0
    assert _to_count(5) == 5


def test_format_rate():
    assert format_rate(4, 10) == "40.0%"
    assert format_rate(0, 10) == "0.0%"
    assert format_rate(5, 0) == "0%"


def test_counters_past_int64_do_not_overflow():
    accounts = pd.DataFrame({"Company Name": ["A"]})
    calls = pd.DataFrame({
        "Company Name": ["A"],
        "Dials": ["99999999999999999999"],
        "Connects": ["9999999999999999999"],
    })
    row = reconcile(accounts, calls).iloc[0]
    assert row["Dials"] == "99999999999999999999"
    assert row["Connects"] == "9999999999999999999"
    assert row["Connect Rate"] == "10.0%"


def test_large_counters_keep_every_digit():
    accounts = pd.DataFrame({"Company Name": ["A"]})
    calls = pd.DataFrame({"Company Name": ["A"], "Dials": ["12345678901234567"]})
    assert reconcile(accounts, calls).at[0, "Dials"] == "12345678901234567"
    assert _to_count("12345678901234567") == 12345678901234567
    assert _to_count("1,234,567,890,123,456,789") == 1234567890123456789
    assert _to_count("7.99") == 7
    assert _to_count("inf") == 0
    assert _to_count("nan") == 0


def test_rate_ties_round_half_up():
    accounts = pd.DataFrame({"Company Name": ["A"]})
    calls = pd.DataFrame({"Company Name": ["A"], "Dials": ["16"], "Connects": ["1"], "Meetings Set": ["3"]})
    row = reconcile(accounts, calls).iloc[0]
    assert row["Connect Rate"] == "6.3%"
    # 3/16 = 18.75%
    assert row["Meeting Rate"] == "18.8%"
    assert format_rate(1, 16) == "6.3%"
    assert pct(1, 16) == 6.3
    assert pct(1, 0) == 0.0
