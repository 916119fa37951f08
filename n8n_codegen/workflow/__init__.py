"""Workflow document model and parsing."""

from .models import Workflow, Node, Connection, ConnectionGraph
from .parser import WorkflowParser, parse_workflow, parse_workflow_file, parse_workflow_string

__all__ = [
    'Workflow',
    'Node',
    'Connection',
    'ConnectionGraph',
    'WorkflowParser',
    'parse_workflow',
    'parse_workflow_file',
    'parse_workflow_string',
]
