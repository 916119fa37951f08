"""Sequences rule-based rewriting and the optional AI rewrite."""

from typing import Optional

import structlog

from n8n_codegen.ai.code_refactor import AIRewriteAdapter
from n8n_codegen.exceptions import ConfigurationError, UpstreamError
from .rules import RuleEngine, default_rule_engine

logger = structlog.get_logger(__name__)


class RefactorOrchestrator:
    """Run the deterministic rules, then the AI rewrite when asked and available.

    The AI step is fail-open: any adapter failure is logged and the
    rule-engine output is returned instead.
    """

    def __init__(
        self,
        rule_engine: Optional[RuleEngine] = None,
        ai_adapter: Optional[AIRewriteAdapter] = None,
    ):
        self.rule_engine = rule_engine or default_rule_engine
        self._ai_adapter = ai_adapter

    @property
    def ai_adapter(self) -> AIRewriteAdapter:
        if self._ai_adapter is None:
            self._ai_adapter = AIRewriteAdapter()
        return self._ai_adapter

    async def refactor(self, code: str, intent: str = "", use_ai: bool = True) -> str:
        if not intent:
            return code

        result = self.rule_engine.apply(code, intent)

        if use_ai and self.ai_adapter.available:
            try:
                result = await self.ai_adapter.rewrite(result, intent)
            except (UpstreamError, ConfigurationError) as e:
                logger.warning("ai_refactor_failed", error=str(e))

        return result


async def refactor_generated_code(
    code: str,
    intent: str = "",
    use_ai: bool = True,
    ai_adapter: Optional[AIRewriteAdapter] = None,
) -> str:
    """Refactor generated code according to ``intent``."""
    orchestrator = RefactorOrchestrator(ai_adapter=ai_adapter)
    return await orchestrator.refactor(code, intent, use_ai)
