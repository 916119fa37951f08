# n8n_codegen/exceptions.py
"""Exceptions raised by the code generation pipeline."""

from typing import Optional


class CodegenError(Exception):
    """Base class for all code generation errors."""
    pass


class UpstreamError(CodegenError):
    """Raised when a remote service (n8n, LLM endpoint) answers with a failure."""

    def __init__(self, service: str, status: Optional[int], body: str):
        self.service = service
        self.status = status
        self.body = body
        if status is None:
            message = f"{service} request failed: {body}"
        else:
            message = f"{service} API error ({status}): {body}"
        super().__init__(message)


class ConfigurationError(CodegenError):
    """Raised when a required setting (e.g. an API key) is missing."""
    pass


class WorkflowParseError(CodegenError):
    """Raised when a workflow document cannot be decoded."""
    pass
