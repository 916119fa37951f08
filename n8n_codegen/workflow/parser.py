import json
import yaml
from typing import Dict, Any, List, Union
from pathlib import Path
import logging

from n8n_codegen.exceptions import WorkflowParseError
from .models import Workflow, Node, Connection, ConnectionGraph

logger = logging.getLogger(__name__)


class WorkflowParser:
    """Shape raw n8n workflow documents into :class:`Workflow` objects.

    Node data is never rejected: a missing or malformed field falls back to
    a default so the generator can still emit something for the node.
    """

    def __init__(self):
        self.warnings: List[str] = []

    def parse_file(self, workflow_file: Path) -> Workflow:
        """Parse workflow from a JSON or YAML file"""
        try:
            with open(workflow_file, 'r', encoding='utf-8') as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise WorkflowParseError(f"Workflow file {workflow_file} is not valid UTF-8: {e}")
        return self.parse_string(content)

    def parse_string(self, content: str) -> Workflow:
        """Parse workflow from JSON or YAML text"""
        try:
            data = json.loads(content)
        except ValueError:
            try:
                data = yaml.safe_load(content)
            except yaml.YAMLError as e:
                raise WorkflowParseError(f"Invalid workflow document: {e}")

        if not isinstance(data, dict):
            raise WorkflowParseError("Workflow document must be a mapping")

        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> Workflow:
        """Parse workflow from an already decoded document"""
        self.warnings.clear()

        raw_id = data.get('id')
        workflow = Workflow(
            id=str(raw_id) if raw_id is not None else None,
            name=self._get_string(data, 'name'),
            active=bool(data.get('active', False)),
            nodes=self._parse_nodes(data.get('nodes')),
            connections=self._parse_connections(data.get('connections')),
        )

        self._check_names(workflow)
        for warning in self.warnings:
            logger.warning(warning)

        return workflow

    def _get_string(self, data: Dict[str, Any], key: str, default: str = "") -> str:
        value = data.get(key)
        if value is None:
            return default
        return value if isinstance(value, str) else str(value)

    def _parse_nodes(self, nodes_data: Any) -> List[Node]:
        if not isinstance(nodes_data, list):
            return []

        nodes = []
        for index, node_data in enumerate(nodes_data):
            if not isinstance(node_data, dict):
                self.warnings.append(f"nodes[{index}]: expected a mapping, skipping")
                continue

            parameters = node_data.get('parameters')
            if not isinstance(parameters, dict):
                parameters = {}

            nodes.append(Node(
                name=self._get_string(node_data, 'name'),
                type=self._get_string(node_data, 'type'),
                parameters=parameters,
                position=self._parse_position(node_data.get('position')),
                disabled=bool(node_data.get('disabled', False)),
            ))
        return nodes

    def _parse_position(self, position: Any) -> tuple:
        if isinstance(position, (list, tuple)) and len(position) == 2:
            try:
                return (float(position[0]), float(position[1]))
            except (TypeError, ValueError):
                pass
        return (0, 0)

    def _parse_connections(self, connections_data: Any) -> ConnectionGraph:
        graph: ConnectionGraph = {}
        if not isinstance(connections_data, dict):
            return graph

        for source, outputs in connections_data.items():
            if not isinstance(outputs, dict):
                continue
            ports = {}
            for port, slots in outputs.items():
                if not isinstance(slots, list):
                    continue
                ports[port] = [self._parse_slot(slot) for slot in slots]
            graph[str(source)] = ports
        return graph

    def _parse_slot(self, slot: Any) -> List[Connection]:
        connections = []
        if not isinstance(slot, list):
            return connections
        for item in slot:
            if not isinstance(item, dict) or 'node' not in item:
                continue
            try:
                index = int(item.get('index', 0))
            except (TypeError, ValueError):
                index = 0
            connections.append(Connection(
                node=str(item['node']),
                type=str(item.get('type', 'main')),
                index=index,
            ))
        return connections

    def _check_names(self, workflow: Workflow) -> None:
        """Record duplicate node names; they are not rejected"""
        names = workflow.node_names
        duplicates = sorted(set(name for name in names if names.count(name) > 1))
        for duplicate in duplicates:
            self.warnings.append(f"Duplicate node name: {duplicate}")

        for source, target in (
            (source, conn.node)
            for source, ports in workflow.connections.items()
            for slots in ports.values()
            for slot in slots
            for conn in slot
        ):
            if workflow.get_node(target) is None:
                self.warnings.append(f"Connection from '{source}' targets unknown node '{target}'")


def parse_workflow(data: Union[Dict[str, Any], Workflow]) -> Workflow:
    """Convenience function accepting a decoded document or a Workflow"""
    if isinstance(data, Workflow):
        return data
    return WorkflowParser().parse_dict(data)


def parse_workflow_file(workflow_file: Path) -> Workflow:
    """Convenience function to parse workflow from file"""
    parser = WorkflowParser()
    return parser.parse_file(workflow_file)


def parse_workflow_string(content: str) -> Workflow:
    """Convenience function to parse workflow from string"""
    parser = WorkflowParser()
    return parser.parse_string(content)

