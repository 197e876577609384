from threefold.application.learning.protocols.ai_content_service import AutofillContent
from threefold.infrastructure.ai.ai_agents import (
    get_autofill_agent,
    get_latex_agent,
    get_tags_agent,
)


class AIService:
    async def autofill(self, statement: str) -> AutofillContent:
        agent = get_autofill_agent()
        result = await agent.run(f"Statement: {statement}")
        return AutofillContent(
            hints=result.output.hints, proof=result.output.proof, tags=result.output.tags
        )

    async def convert_to_latex(self, text: str) -> str:
        agent = get_latex_agent()
        result = await agent.run(text)
        return result.output.strip()

    async def suggest_tags(self, statement: str) -> list[str]:
        agent = get_tags_agent()
        result = await agent.run(f"Statement: {statement}")
        return result.output
