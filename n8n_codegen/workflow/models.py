"""Typed snapshot of an n8n workflow document."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

N8N_BASE_PREFIX = "n8n-nodes-base."


@dataclass(frozen=True)
class Connection:
    """One edge endpoint: the target node, its input port and input slot."""
    node: str
    type: str = "main"
    index: int = 0


# source node name -> output port -> output slots -> connections
ConnectionGraph = Dict[str, Dict[str, List[List[Connection]]]]


@dataclass
class Node:
    name: str
    type: str
    parameters: Dict[str, Any] = field(default_factory=dict)
    position: Tuple[float, float] = (0, 0)
    disabled: bool = False

    @property
    def short_type(self) -> str:
        """Type identifier without the n8n base package prefix."""
        if self.type.startswith(N8N_BASE_PREFIX):
            return self.type[len(N8N_BASE_PREFIX):]
        return self.type


@dataclass
class Workflow:
    id: Optional[str]
    name: str
    active: bool = False
    nodes: List[Node] = field(default_factory=list)
    connections: ConnectionGraph = field(default_factory=dict)

    @property
    def node_names(self) -> List[str]:
        return [node.name for node in self.nodes]

    def get_node(self, name: str) -> Optional[Node]:
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def successors(self, name: str) -> List[str]:
        """Names of nodes fed by any output of ``name``, in connection order."""
        result = []
        for slots in self.connections.get(name, {}).values():
            for slot in slots:
                for connection in slot:
                    if connection.node not in result:
                        result.append(connection.node)
        return result
