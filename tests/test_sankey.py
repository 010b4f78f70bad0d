import plotly.graph_objects as go

from flow.aggregate import build_flow_graph
from flow.graph import to_digraph
from flow.sankey import build_sankey_figure, sankey_trace
from reconcile.join import reconcile


def _graph(accounts, calls):
    return build_flow_graph(reconcile(accounts, calls))


def test_trace_matches_graph(acme_accounts, acme_calls):
    graph = _graph(acme_accounts, acme_calls)
    trace = sankey_trace(graph)
    assert len(trace["node"]["label"]) == len(graph.nodes)
    assert trace["node"]["label"][0] == "Construction<br>4"
    assert trace["link"]["source"] == [l.source for l in graph.links]
    assert trace["link"]["value"] == [l.value for l in graph.links]
    assert trace["node"]["pad"] == 50


def test_figure_annotations(acme_accounts, acme_calls):
    fig = build_sankey_figure(_graph(acme_accounts, acme_calls), height=1300)
    assert isinstance(fig, go.Figure)
    assert fig.layout.height == 1300
    texts = [a.text for a in fig.layout.annotations]
    assert texts == [
        "<b>Connects by Industry</b>",
        "<b>Total Connects: 4</b>",
        "<b>Conversations: 3 (75.0%)</b>",
        "<b>Meetings: 2 (66.7%)</b>",
        "<b>Applications: 1 (50.0%)</b>",
        "<b>Outcome</b>",
    ]


def test_digraph_view(acme_accounts, acme_calls):
    graph = _graph(acme_accounts, acme_calls)
    G = to_digraph(graph)
    assert G.number_of_nodes() == len(graph.nodes)
    assert G.number_of_edges() == len(graph.links)
    assert G.edges[0, 6]["value"] == 4
    assert G.nodes[28]["label"] == "Approved"
