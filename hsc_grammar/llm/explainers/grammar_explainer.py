import logging

from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from hsc_grammar.config import settings
from hsc_grammar.core.texts import Messages, get_text
from hsc_grammar.llm.explainers.prompt_templates import (
    SYSTEM_PROMPT_FOR_EXPLANATION,
    USER_PROMPT_FOR_EXPLANATION,
)
from hsc_grammar.llm.llm_base import BaseLLMService

logger = logging.getLogger(__name__)


class GrammarExplainer:
    def __init__(self, llm_service: BaseLLMService):
        self.llm_service = llm_service

    async def explain(self, query: str) -> str:
        """Free-text answer to a learner's grammar question."""
        chat_prompt = ChatPromptTemplate.from_messages(
            [
                ('system', SYSTEM_PROMPT_FOR_EXPLANATION),
                ('user', USER_PROMPT_FOR_EXPLANATION),
            ]
        )
        try:
            chain = await self.llm_service.create_llm_chain(
                chat_prompt,
                StrOutputParser(),
                max_tokens=settings.explanation_max_tokens,
            )
            explanation = await self.llm_service.run_llm_chain(
                chain=chain,
                input_data={'query': query},
            )
        except Exception as e:
            logger.error(f'Grammar explanation failed: {e}', exc_info=True)
            return get_text(Messages.EXPLANATION_ERROR)

        if not explanation or not str(explanation).strip():
            return get_text(Messages.EXPLANATION_EMPTY)
        return str(explanation)
