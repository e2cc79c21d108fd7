"""공용 그래프 노드 모음."""

from genie_chat.shared.chat.nodes.function_node import FunctionNode, NodeFunction, coerce_state_mapping

__all__ = ["FunctionNode", "NodeFunction", "coerce_state_mapping"]
