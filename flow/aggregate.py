# flow/aggregate.py
import logging
import pandas as pd

from flow.colors import (
    APPROVED_COLOR,
    INDUSTRY_COLORS,
    NOT_INTERESTED_COLOR,
    NOT_INTERESTED_LINK_COLOR,
    REJECTED_COLOR,
    REJECTED_LINK_COLOR,
    UNIFIED_COLOR,
    link_color,
)
from flow.layout import drop_off_index, industry_index, outcome_index, stage_of, stage_start
from flow.models import FlowAnomaly, FlowGraph, FlowTotals, IndustryFunnel, Link, Node
from reconcile.columns import (
    APPLICATION_STAGES,
    COL_APPLICATION_STATUS,
    COL_CONNECTS,
    COL_CONVERSATIONS,
    COL_INDUSTRY,
    COL_LIFECYCLE_STAGE,
    COL_MEETINGS,
    STATUS_APPROVED,
    STATUS_REJECTED,
)
from reconcile.normalize import as_frame, count_column, ensure_columns, pct

logger = logging.getLogger(__name__)

# Stages 2-4: (funnel field, node label prefix, drop-off label)
MIDDLE_STAGES = [
    ("conversations", "Conversations", "Not Interested"),
    ("meetings", "Meetings", "Not Interested."),
    ("applications", "Apps", "Not Interested.."),
]

FUNNEL_FIELDS = ["connects", "conversations", "meetings", "applications", "approved", "rejected"]


def _clamp(value: int) -> int:
    return value if value > 0 else 0

# --------- AGGREGATION ---------
def aggregate_industries(df: pd.DataFrame, industries) -> list[IndustryFunnel]:
    """
    Sum connects/conversations/meetings per industry and count applications
    (Lifecycle Stage SQL or Opportunity) with their Approved/Rejected status.
    Rows outside `industries` are ignored. One funnel per industry, in order.
    """
    rows = ensure_columns(
        as_frame(df), [COL_INDUSTRY, COL_LIFECYCLE_STAGE, COL_APPLICATION_STATUS]
    )
    rows = rows.loc[rows[COL_INDUSTRY].isin(industries)]

    is_app = rows[COL_LIFECYCLE_STAGE].isin(APPLICATION_STAGES)
    status = rows[COL_APPLICATION_STATUS]
    per_row = pd.DataFrame({
        "industry": rows[COL_INDUSTRY],
        "connects": count_column(rows, COL_CONNECTS),
        "conversations": count_column(rows, COL_CONVERSATIONS),
        "meetings": count_column(rows, COL_MEETINGS),
        "applications": is_app.astype("int64"),
        "approved": (is_app & (status == STATUS_APPROVED)).astype("int64"),
        "rejected": (is_app & (status == STATUS_REJECTED)).astype("int64"),
    }, columns=["industry"] + FUNNEL_FIELDS)

    # object dtype so totals are exact Python ints
    per_row[FUNNEL_FIELDS] = per_row[FUNNEL_FIELDS].astype(object)
    sums = per_row.groupby("industry")[FUNNEL_FIELDS].sum().reindex(list(industries), fill_value=0)
    return [
        IndustryFunnel(ind, **{k: int(sums.at[ind, k]) for k in FUNNEL_FIELDS})
        for ind in industries
    ]


def flow_totals(funnels) -> FlowTotals:
    connects = sum(f.connects for f in funnels)
    conversations = sum(f.conversations for f in funnels)
    meetings = sum(f.meetings for f in funnels)
    applications = sum(f.applications for f in funnels)
    return FlowTotals(
        connects=connects,
        conversations=conversations,
        meetings=meetings,
        applications=applications,
        conversation_rate=pct(conversations, connects),
        meeting_rate=pct(meetings, conversations),
        application_rate=pct(applications, meetings),
    )


def find_anomalies(funnels) -> tuple[FlowAnomaly, ...]:
    """Remainders that would have been negative links."""
    found = []
    for f in funnels:
        for stage, value in (
            ("conversations", f.conversations - f.meetings),
            ("meetings", f.meetings - f.applications),
            ("applications", f.remaining),
        ):
            if value < 0:
                found.append(FlowAnomaly(f.industry, stage, value))
    unreached = sum(f.connects for f in funnels) - sum(f.conversations for f in funnels)
    if unreached < 0:
        found.append(FlowAnomaly(None, "connects", unreached))
    return tuple(found)

# --------- NODES ---------
def build_nodes(funnels, colors) -> tuple[Node, ...]:
    """Labels and colors in layout order; each node's stage comes from the layout."""
    n = len(funnels)
    specs = [(f"{f.industry}\n{f.connects}", colors[f.industry]) for f in funnels]
    specs.append((f"Connects\n{sum(f.connects for f in funnels)}", UNIFIED_COLOR))

    for key, name, drop_label in MIDDLE_STAGES:
        for f in funnels:
            specs.append((f"{name} - {f.industry}\n{getattr(f, key)}", colors[f.industry]))
        specs.append((drop_label, NOT_INTERESTED_COLOR))

    specs.append(("Approved", APPROVED_COLOR))
    specs.append(("Rejected", REJECTED_COLOR))
    specs.append(("Not Progressed", NOT_INTERESTED_COLOR))
    return tuple(Node(label, color, stage_of(idx, n)) for idx, (label, color) in enumerate(specs))

# --------- LINKS ---------
def _industry_links(i: int, f: IndustryFunnel, n: int, color: str):
    clr = link_color(color)
    unified = stage_start(1, n)
    conv = industry_index(2, i, n)
    meet = industry_index(3, i, n)
    apps = industry_index(4, i, n)

    yield Link(industry_index(0, i, n), unified, f.connects, clr)
    yield Link(unified, conv, f.conversations, clr)

    yield Link(conv, meet, f.meetings, clr)
    yield Link(conv, drop_off_index(3, n), _clamp(f.conversations - f.meetings), NOT_INTERESTED_LINK_COLOR)

    yield Link(meet, apps, f.applications, clr)
    yield Link(meet, drop_off_index(4, n), _clamp(f.meetings - f.applications), NOT_INTERESTED_LINK_COLOR)

    yield Link(apps, outcome_index("Approved", n), f.approved, clr)
    yield Link(apps, outcome_index("Rejected", n), f.rejected, REJECTED_LINK_COLOR)
    yield Link(apps, outcome_index("Not Progressed", n), _clamp(f.remaining), NOT_INTERESTED_LINK_COLOR)


def build_links(funnels, colors) -> tuple[Link, ...]:
    """
    All links of the graph in emission order: per industry (connects ->
    unified -> conversations -> meetings -> apps -> outcomes), then the
    unified connects that never became a conversation. Zero flows are skipped.
    """
    n = len(funnels)
    candidates = []
    for i, f in enumerate(funnels):
        candidates.extend(_industry_links(i, f, n, colors[f.industry]))

    unreached = sum(f.connects for f in funnels) - sum(f.conversations for f in funnels)
    candidates.append(Link(stage_start(1, n), drop_off_index(2, n), _clamp(unreached), NOT_INTERESTED_LINK_COLOR))

    return tuple(link for link in candidates if link.value > 0)

# --------- GRAPH ---------
def build_flow_graph(reconciled_rows, colors=None):
    """
    Turn reconciled rows into the six-stage flow graph.
    Returns None when there are no rows.
    """
    df = as_frame(reconciled_rows)
    if df.empty:
        return None

    colors = colors or INDUSTRY_COLORS
    industries = sorted(colors)
    funnels = aggregate_industries(df, industries)

    anomalies = find_anomalies(funnels)
    for anomaly in anomalies:
        logger.warning("[flow] %s", anomaly.describe())

    return FlowGraph(
        industries=tuple(industries),
        nodes=build_nodes(funnels, colors),
        links=build_links(funnels, colors),
        totals=flow_totals(funnels),
        anomalies=anomalies,
    )
