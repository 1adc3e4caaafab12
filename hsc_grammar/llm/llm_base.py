import logging
from typing import Any, Dict, Optional, Union

from langchain_core.output_parsers import (
    JsonOutputParser,
    PydanticOutputParser,
    StrOutputParser,
)
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import RunnableSerializable
from langchain_openai import ChatOpenAI
from pydantic import ValidationError

from hsc_grammar.config import settings

logger = logging.getLogger(__name__)


class BaseLLMService:
    def __init__(
        self,
        openai_api_key: str = settings.openai_api_key,
        model_name: str = settings.openai_main_model_name,
    ):
        if not openai_api_key:
            raise ValueError('OPENAI_API_KEY environment variable is not set')

        self.model = ChatOpenAI(
            api_key=openai_api_key,
            model=model_name,
            temperature=settings.openai_temperature,
            timeout=settings.openai_request_timeout,
            max_retries=settings.openai_max_retries,
        )

    @property
    def model_name(self) -> str:
        return self.model.model_name

    async def create_llm_chain(
        self,
        chat_prompt: ChatPromptTemplate,
        output_parser: Union[
            PydanticOutputParser, JsonOutputParser, StrOutputParser
        ],
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> RunnableSerializable:
        model_kwargs: Dict[str, Any] = {}
        if max_tokens:
            model_kwargs['max_tokens'] = max_tokens
        if json_mode:
            model_kwargs['response_format'] = {'type': 'json_object'}

        model = self.model.bind(**model_kwargs) if model_kwargs else self.model
        chain = chat_prompt | model | output_parser
        return chain

    async def run_llm_chain(
        self,
        chain: RunnableSerializable,
        input_data: Dict[str, Any],
    ) -> Any:
        try:
            response = await chain.ainvoke(input_data)
            return response
        except ValidationError as e:
            logger.error(f'Validation error in LLM response: {e}')
            raise ValueError(f'Invalid response format from LLM: {e}') from e
        except GeneratorExit:
            logger.warning('LLM request was interrupted')
            raise
        except Exception as e:
            logger.error(f'Error during LLM request: {e}')
            raise RuntimeError(f'LLM service error: {e}') from e
