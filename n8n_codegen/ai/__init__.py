"""LLM-assisted refactoring of generated code."""

from .providers.openai import OpenAIConfig, OpenAIProvider
from .code_refactor import AIRewriteAdapter, ai_refactor_generated_code

__all__ = [
    'OpenAIConfig',
    'OpenAIProvider',
    'AIRewriteAdapter',
    'ai_refactor_generated_code',
]
