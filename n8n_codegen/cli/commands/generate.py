# n8n_codegen/cli/commands/generate.py
"""CLI commands for workflow-to-code generation."""

import asyncio
import functools
import sys
from pathlib import Path
from typing import Optional

import click
import httpx

from n8n_codegen.config import get_features
from n8n_codegen.exceptions import CodegenError
from n8n_codegen.generator.emitters import default_registry
from n8n_codegen.generator.engine import CodeGenerator, ORDER_GRAPH, ORDER_SEQUENCE
from n8n_codegen.pipeline import convert_workflow_to_code
from n8n_codegen.refactor.orchestrator import refactor_generated_code
from n8n_codegen.workflow.parser import parse_workflow_file


def async_command(f):
    """Decorator to run async functions with Click."""
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))
    return wrapper


def handle_errors(f):
    """Report pipeline errors as ``Error: <message>`` and exit with status 1."""
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (CodegenError, httpx.HTTPError, httpx.InvalidURL) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
    return wrapper


def write_output(code: str, output: Optional[Path]) -> None:
    if output is None:
        click.echo(code, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(code, encoding='utf-8')
    click.echo(f"✅ Code written to: {output}", err=True)


def warn_if_ai_unavailable(intent: str, use_ai: bool) -> None:
    if intent and use_ai and not get_features().ai_refactor:
        click.echo("⚠️  OPENAI_API_KEY not set - applying rule-based refactoring only", err=True)


order_option = click.option(
    '--order',
    type=click.Choice([ORDER_SEQUENCE, ORDER_GRAPH]),
    default=ORDER_SEQUENCE,
    show_default=True,
    help='Emit nodes in stored order or in connection-graph order',
)
intent_option = click.option('--intent', '-i', default='', help='Optional refactoring intent')
ai_option = click.option('--ai/--no-ai', 'use_ai', default=True, help='Use LLM to refactor code')
output_option = click.option(
    '--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
    help='Output file (default: stdout)'
)


@click.group()
def generate():
    """Generate Node.js code from n8n workflows."""
    pass


@generate.command()
@click.argument('workflow_id')
@intent_option
@ai_option
@order_option
@output_option
@handle_errors
@async_command
async def remote(workflow_id: str, intent: str, use_ai: bool, order: str, output: Optional[Path]):
    """Fetch a workflow from n8n by id and convert it to code."""
    warn_if_ai_unavailable(intent, use_ai)
    code = await convert_workflow_to_code(
        workflow_id,
        intent=intent,
        use_ai=use_ai,
        generator=CodeGenerator(order=order),
    )
    write_output(code, output)


@generate.command()
@click.argument('workflow_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@intent_option
@ai_option
@order_option
@output_option
@handle_errors
@async_command
async def file(workflow_file: Path, intent: str, use_ai: bool, order: str, output: Optional[Path]):
    """Convert an exported workflow (JSON or YAML) to code."""
    warn_if_ai_unavailable(intent, use_ai)
    workflow = parse_workflow_file(workflow_file)
    code = CodeGenerator(order=order).generate(workflow)
    if intent:
        code = await refactor_generated_code(code, intent, use_ai)
    write_output(code, output)


@generate.command('node-types')
def node_types():
    """List node types with a dedicated emitter."""
    for node_type in default_registry.list_types():
        click.echo(node_type)
