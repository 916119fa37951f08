"""Rule-based and AI-assisted refactoring of generated code."""

from .rules import RewriteRule, RuleEngine, apply_rules, default_rule_engine
from .orchestrator import RefactorOrchestrator, refactor_generated_code

__all__ = [
    'RewriteRule',
    'RuleEngine',
    'apply_rules',
    'default_rule_engine',
    'RefactorOrchestrator',
    'refactor_generated_code',
]
