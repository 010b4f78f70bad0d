# flow/sankey.py
from typing import Any, Dict

import plotly.graph_objects as go

BASE_HEIGHT = 2600
FONT_FAMILY = "-apple-system, BlinkMacSystemFont, Segoe UI, Roboto, sans-serif"
TEXT_COLOR = "#e2e8f0"


def sankey_trace(graph) -> Dict[str, Any]:
    """plotly node/link payload for a FlowGraph."""
    return {
        "node": dict(
            label=[n.label.replace("\n", "<br>") for n in graph.nodes],
            color=[n.color for n in graph.nodes],
            pad=50,
            thickness=30,
            line=dict(color="#334155", width=1),
        ),
        "link": dict(
            source=[l.source for l in graph.links],
            target=[l.target for l in graph.links],
            value=[l.value for l in graph.links],
            color=[l.color for l in graph.links],
        ),
    }


def stage_annotations(totals, size: int = 18) -> list[dict]:
    titles = [
        "Connects by Industry",
        f"Total Connects: {totals.connects}",
        f"Conversations: {totals.conversations} ({totals.conversation_rate}%)",
        f"Meetings: {totals.meetings} ({totals.meeting_rate}%)",
        f"Applications: {totals.applications} ({totals.application_rate}%)",
        "Outcome",
    ]
    return [
        dict(
            x=i / (len(titles) - 1),
            y=1.04,
            text=f"<b>{t}</b>",
            showarrow=False,
            xref="paper",
            yref="paper",
            font=dict(size=size, color=TEXT_COLOR),
        )
        for i, t in enumerate(titles)
    ]


def build_sankey_figure(graph, height: int = BASE_HEIGHT) -> go.Figure:
    payload = sankey_trace(graph)
    fig = go.Figure(
        go.Sankey(
            orientation="h",
            node=payload["node"],
            link=payload["link"],
            textfont=dict(size=20, color="#f1f5f9", family=FONT_FAMILY),
        )
    )
    fig.update_layout(
        font=dict(family=FONT_FAMILY, size=16, color=TEXT_COLOR),
        height=height,
        margin=dict(l=10, r=150, t=70, b=20),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        annotations=stage_annotations(graph.totals),
    )
    return fig
