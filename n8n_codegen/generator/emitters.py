# n8n_codegen/generator/emitters.py
"""Per-node-type emitters that lower one workflow node into JavaScript lines."""

import json
import re
from typing import Any, Callable, Dict, List, Optional

from n8n_codegen.workflow.models import Node

INDENT = "  "

Emitter = Callable[[Node], List[str]]

_IDENTIFIER_RE = re.compile(r'[^a-zA-Z0-9_]')


def sanitize(name: Any) -> str:
    """Turn an arbitrary name into a JavaScript identifier.

    Every character outside ``[A-Za-z0-9_]`` becomes ``_``. No other
    escaping or collision avoidance is done, so two different names may
    map to the same identifier.
    """
    return _IDENTIFIER_RE.sub('_', str(name))


def js_literal(value: Any) -> str:
    """Serialize a parameter value as a JavaScript literal (JSON text)."""
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return json.dumps(str(value), ensure_ascii=False)


def emit_http_request(node: Node) -> List[str]:
    params = node.parameters
    method = params.get('httpMethod') or params.get('method') or 'GET'
    url = params.get('url') or ''
    # The URL goes into a template literal untouched so ${...} expressions survive
    return [
        f"{INDENT}const {sanitize(node.name)} = await axios({{ method: '{method}', url: `{url}` }});"
    ]


def emit_set(node: Node) -> List[str]:
    values = node.parameters.get('values')
    if not isinstance(values, list):
        return []

    lines = []
    for entry in values:
        if not isinstance(entry, dict):
            continue
        lines.append(
            f"{INDENT}const {sanitize(entry.get('name', ''))} = {js_literal(entry.get('value'))};"
        )
    return lines


def emit_function(node: Node) -> List[str]:
    code = node.parameters.get('functionCode')
    if not code:
        return []
    # Caller-authored code is injected verbatim, only re-indented
    return ['\n'.join(INDENT + line for line in str(code).split('\n'))]


def emit_unhandled(node: Node) -> List[str]:
    return [f"{INDENT}// TODO: handle node type {node.type}"]


class EmitterRegistry:
    """Maps node type identifiers to emitters."""

    def __init__(self, fallback: Emitter = emit_unhandled):
        self._emitters: Dict[str, Emitter] = {}
        self._fallback = fallback

    def register(self, node_type: str, emitter: Emitter) -> None:
        self._emitters[node_type] = emitter

    def get(self, node_type: str) -> Optional[Emitter]:
        return self._emitters.get(node_type)

    def list_types(self) -> List[str]:
        return sorted(self._emitters)

    def emit(self, node: Node) -> List[str]:
        """Emit the body lines for ``node``; never raises for malformed data."""
        emitter = self._emitters.get(node.type) or self._emitters.get(node.short_type)
        if emitter is None:
            return self._fallback(node)
        return emitter(node)


def create_default_registry() -> EmitterRegistry:
    registry = EmitterRegistry()
    registry.register('httpRequest', emit_http_request)
    registry.register('set', emit_set)
    registry.register('function', emit_function)
    return registry


default_registry = create_default_registry()
