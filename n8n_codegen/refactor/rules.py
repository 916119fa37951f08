"""Deterministic rewrite rules keyed by intent keywords.

Rules are purely lexical: they run over every line of the program,
including string literals and comments.
"""

import re
from dataclasses import dataclass, field
from typing import List, Pattern, Tuple

import structlog

logger = structlog.get_logger(__name__)


@dataclass
class RewriteRule:
    """Pattern/replacement pairs applied when ``trigger`` appears in the intent."""
    name: str
    trigger: str
    substitutions: List[Tuple[str, str]] = field(default_factory=list)

    def __post_init__(self):
        self._compiled: List[Tuple[Pattern, str]] = [
            (re.compile(pattern), replacement)
            for pattern, replacement in self.substitutions
        ]

    def matches(self, intent: str) -> bool:
        return self.trigger in intent

    def apply_line(self, line: str) -> str:
        for pattern, replacement in self._compiled:
            line = pattern.sub(replacement, line)
        return line


PREFER_CONST = RewriteRule(
    name="prefer-const",
    trigger="use const",
    substitutions=[
        (r'\blet\b', 'const'),
        (r'\bvar\b', 'const'),
    ],
)


class RuleEngine:
    """Applies registered rules in registration order."""

    def __init__(self, rules: List[RewriteRule] = None):
        self.rules: List[RewriteRule] = list(rules) if rules is not None else [PREFER_CONST]

    def register(self, rule: RewriteRule) -> None:
        self.rules.append(rule)

    def apply(self, code: str, intent: str) -> str:
        if not intent:
            return code

        active = [rule for rule in self.rules if rule.matches(intent)]
        if not active:
            return code

        # keepends so the exact line terminators survive the rewrite
        lines = code.splitlines(keepends=True)
        for rule in active:
            lines = [rule.apply_line(line) for line in lines]
            logger.debug("rewrite_rule_applied", rule=rule.name)

        return ''.join(lines)


default_rule_engine = RuleEngine()


def apply_rules(code: str, intent: str) -> str:
    """Apply the built-in rewrite rules matching ``intent``."""
    return default_rule_engine.apply(code, intent)
