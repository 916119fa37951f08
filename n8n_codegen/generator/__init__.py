# n8n_codegen/generator/__init__.py
"""Workflow-to-code generation system."""

from .emitters import EmitterRegistry, create_default_registry, default_registry, sanitize
from .engine import CodeGenerator, generate_code_from_workflow

__all__ = [
    'EmitterRegistry',
    'create_default_registry',
    'default_registry',
    'sanitize',
    'CodeGenerator',
    'generate_code_from_workflow',
]
