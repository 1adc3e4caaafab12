from typing import Annotated, Optional

from fastapi import Depends, Request

from hsc_grammar.api.errors import ServiceUnavailableError
from hsc_grammar.core.interfaces.llm_provider import LLMProvider
from hsc_grammar.core.services.evaluation_dispatcher import (
    EvaluationDispatcher,
)


async def get_optional_llm_service(
    request: Request,
) -> Optional[LLMProvider]:
    if not hasattr(request.app.state, 'llm_service'):
        raise RuntimeError('LLMService not initialized in app.state')
    return request.app.state.llm_service


async def get_llm_service_dependency(
    llm_service: Annotated[
        Optional[LLMProvider], Depends(get_optional_llm_service)
    ],
) -> LLMProvider:
    if llm_service is None:
        raise ServiceUnavailableError('LLM service is not configured')
    return llm_service


def get_evaluation_dispatcher(
    llm_service: Annotated[
        Optional[LLMProvider], Depends(get_optional_llm_service)
    ],
) -> EvaluationDispatcher:
    return EvaluationDispatcher(llm_service=llm_service)
