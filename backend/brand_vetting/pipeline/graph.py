from langgraph.graph import END, START, StateGraph

from .nodes import (
    aggregate_scores_node,
    analyze_sentiment_node,
    classify_existence_node,
    detect_certification_node,
    gather_evidence_node,
    generate_insights_node,
)
from .state import VettingState
from .timing import log_timing


def _route_after_existence(state: VettingState):
    """Short-circuit to END when the brand was not found."""
    if not state.get("brand_exists"):
        return END
    return ["detect_certification", "analyze_sentiment"]


def create_vetting_graph() -> StateGraph:
    """
    Create the brand vetting pipeline graph.

    Structure:
    START -> gather_evidence
          -> classify_existence
          -> END                                       (not found)
          -> [detect_certification, analyze_sentiment] (parallel)
          -> aggregate_scores
          -> generate_insights
          -> END
    """
    log_timing("graph", "Creating brand vetting graph")

    graph = StateGraph(VettingState)

    graph.add_node("gather_evidence", gather_evidence_node)
    graph.add_node("classify_existence", classify_existence_node)
    graph.add_node("detect_certification", detect_certification_node)
    graph.add_node("analyze_sentiment", analyze_sentiment_node)
    graph.add_node("aggregate_scores", aggregate_scores_node)
    graph.add_node("generate_insights", generate_insights_node)

    graph.add_edge(START, "gather_evidence")
    graph.add_edge("gather_evidence", "classify_existence")

    graph.add_conditional_edges(
        "classify_existence",
        _route_after_existence,
        ["detect_certification", "analyze_sentiment", END],
    )

    # Both analyzers must finish before aggregation
    graph.add_edge(["detect_certification", "analyze_sentiment"], "aggregate_scores")
    graph.add_edge("aggregate_scores", "generate_insights")
    graph.add_edge("generate_insights", END)

    return graph


vetting_graph = create_vetting_graph().compile()
