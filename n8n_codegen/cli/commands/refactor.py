# n8n_codegen/cli/commands/refactor.py
"""CLI command for refactoring previously generated code."""

from pathlib import Path
from typing import Optional

import click

from n8n_codegen.refactor.orchestrator import refactor_generated_code
from .generate import async_command, handle_errors, warn_if_ai_unavailable, write_output


@click.command()
@click.argument('code_file', type=click.File('r', encoding='utf-8'))
@click.option('--intent', '-i', required=True, help='Refactoring intent, e.g. "use const"')
@click.option('--ai/--no-ai', 'use_ai', default=True, help='Use LLM to refactor code')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output file (default: stdout)')
@handle_errors
@async_command
async def refactor(code_file, intent: str, use_ai: bool, output: Optional[Path]):
    """Refactor generated code read from CODE_FILE ('-' for stdin)."""
    warn_if_ai_unavailable(intent, use_ai)
    code = await refactor_generated_code(code_file.read(), intent, use_ai)
    write_output(code, output)
