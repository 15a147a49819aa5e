"""Projection of stored relationships into a node/link graph."""
from __future__ import annotations

from typing import Dict, Iterable, List

from ensgraph.domain.entities import GraphData, GraphLink, RelationshipEntity


def project(relationships: Iterable[RelationshipEntity]) -> GraphData:
    """Build graph data from the full relationship set.

    Nodes are the distinct source/target names in first-seen order; each
    relationship yields one link carrying its id so a drawn edge can be
    traced back to a deletable record.
    """
    nodes: Dict[str, None] = {}
    links: List[GraphLink] = []
    for rel in relationships:
        nodes.setdefault(rel["source_ens"])
        nodes.setdefault(rel["target_ens"])
        link: GraphLink = {"source": rel["source_ens"], "target": rel["target_ens"]}
        if rel.get("id") is not None:
            link["id"] = rel["id"]
        links.append(link)
    return {"nodes": [{"id": name} for name in nodes], "links": links}


def graph_stats(graph: GraphData) -> Dict[str, int]:
    return {"nodes": len(graph["nodes"]), "links": len(graph["links"])}
