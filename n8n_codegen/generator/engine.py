# n8n_codegen/generator/engine.py
"""Main code generation engine."""

import heapq
import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jinja2

from n8n_codegen.workflow.models import Node, Workflow
from n8n_codegen.workflow.parser import parse_workflow
from .emitters import EmitterRegistry, INDENT, default_registry

logger = logging.getLogger(__name__)

ORDER_SEQUENCE = "sequence"
ORDER_GRAPH = "graph"


class CodeGenerator:
    """Generate a standalone Node.js program from an n8n workflow."""

    def __init__(
        self,
        registry: Optional[EmitterRegistry] = None,
        order: str = ORDER_SEQUENCE,
        templates_dir: Optional[Path] = None,
    ):
        if order not in (ORDER_SEQUENCE, ORDER_GRAPH):
            raise ValueError(f"Unknown node order: {order}")

        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.registry = registry or default_registry
        self.order = order
        self.templates_dir = templates_dir
        self._setup_jinja()

    def _setup_jinja(self):
        """Setup Jinja2 environment."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(self.templates_dir),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True
        )

    def generate(self, workflow: Union[Workflow, Dict[str, Any]]) -> str:
        """Generate program text for a workflow.

        Output depends only on the workflow content, so repeated calls on
        the same document give byte-identical results.
        """
        workflow = parse_workflow(workflow)
        nodes = self._ordered_nodes(workflow)

        logger.info(f"Generating code for workflow '{workflow.name}' ({len(nodes)} nodes)")

        lines: List[str] = []
        for node in nodes:
            lines.append(f"{INDENT}// {node.name} ({node.type})")
            lines.extend(self.registry.emit(node))
            lines.append('')

        template = self.jinja_env.get_template('program.js.j2')
        return template.render(lines=lines)

    def _ordered_nodes(self, workflow: Workflow) -> List[Node]:
        if self.order == ORDER_GRAPH:
            return self._topological_nodes(workflow)
        return list(workflow.nodes)

    def _topological_nodes(self, workflow: Workflow) -> List[Node]:
        """Kahn's algorithm over the connection graph, ties broken by list order."""
        nodes = workflow.nodes
        indices_by_name: Dict[str, List[int]] = defaultdict(list)
        for index, node in enumerate(nodes):
            indices_by_name[node.name].append(index)

        successors: Dict[int, List[int]] = defaultdict(list)
        in_degree = [0] * len(nodes)
        for index, node in enumerate(nodes):
            for target_name in workflow.successors(node.name):
                for target in indices_by_name.get(target_name, []):
                    successors[index].append(target)
                    in_degree[target] += 1

        ready = [index for index, degree in enumerate(in_degree) if degree == 0]
        heapq.heapify(ready)
        ordered: List[int] = []
        while ready:
            index = heapq.heappop(ready)
            ordered.append(index)
            for target in successors[index]:
                in_degree[target] -= 1
                if in_degree[target] == 0:
                    heapq.heappush(ready, target)

        if len(ordered) < len(nodes):
            emitted = set(ordered)
            leftover = [index for index in range(len(nodes)) if index not in emitted]
            logger.warning(
                f"Workflow '{workflow.name}' has a cycle; "
                f"{len(leftover)} nodes emitted in list order"
            )
            ordered.extend(leftover)

        return [nodes[index] for index in ordered]


def generate_code_from_workflow(workflow: Union[Workflow, Dict[str, Any]]) -> str:
    """Convenience function to generate code with the default settings"""
    return CodeGenerator().generate(workflow)
