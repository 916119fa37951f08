import sys
import os
import asyncio
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from n8n_codegen.generator.engine import CodeGenerator
from n8n_codegen.refactor.orchestrator import refactor_generated_code
from n8n_codegen.workflow.parser import parse_workflow_file


async def main():
    workflow_file = Path(__file__).parent / "workflows" / "fetch_and_notify.json"
    workflow = parse_workflow_file(workflow_file)

    code = CodeGenerator().generate(workflow)
    print(code)

    # Rule-based only; pass use_ai=True with OPENAI_API_KEY set to add the LLM pass
    refactored = await refactor_generated_code(code, "use const", use_ai=False)
    print(refactored)


if __name__ == "__main__":
    asyncio.run(main())
