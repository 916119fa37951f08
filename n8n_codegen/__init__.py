"""n8n workflow to code converter."""

__version__ = "1.0.0"

from n8n_codegen.generator.engine import CodeGenerator, generate_code_from_workflow
from n8n_codegen.refactor.orchestrator import RefactorOrchestrator, refactor_generated_code
from n8n_codegen.workflow.models import Workflow, Node, Connection
from n8n_codegen.exceptions import (
    CodegenError,
    ConfigurationError,
    UpstreamError,
    WorkflowParseError,
)

__all__ = [
    "CodeGenerator",
    "generate_code_from_workflow",
    "RefactorOrchestrator",
    "refactor_generated_code",
    "Workflow",
    "Node",
    "Connection",
    "CodegenError",
    "ConfigurationError",
    "UpstreamError",
    "WorkflowParseError",
]
