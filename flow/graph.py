# flow/graph.py
import networkx as nx
import pandas as pd


def to_digraph(graph) -> nx.DiGraph:
    """
    networkx view of a FlowGraph. Nodes are the layout indices with
    label/color/stage attributes; edges carry `value` and `color`.
    Links are unique per (source, target), so no multigraph is needed.
    """
    G = nx.DiGraph()
    for idx, node in enumerate(graph.nodes):
        G.add_node(idx, label=node.label, color=node.color, stage=node.stage)
    for link in graph.links:
        if link.source not in G or link.target not in G:
            raise KeyError(f"link {link.source}->{link.target} references a missing node")
        G.add_edge(link.source, link.target, value=link.value, color=link.color)
    return G


def node_throughput(graph) -> pd.DataFrame:
    """Inflow and outflow per node, in node order."""
    G = to_digraph(graph)
    rows = []
    for idx in G.nodes:
        rows.append({
            "index": idx,
            "label": G.nodes[idx]["label"].replace("\n", " "),
            "stage": G.nodes[idx]["stage"],
            "inflow": int(G.in_degree(idx, weight="value")),
            "outflow": int(G.out_degree(idx, weight="value")),
        })
    return pd.DataFrame(rows, columns=["index", "label", "stage", "inflow", "outflow"])
