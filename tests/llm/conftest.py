from unittest.mock import MagicMock, create_autospec

import pytest
from langchain_core.language_models import FakeListChatModel

from hsc_grammar.llm.llm_base import BaseLLMService
from hsc_grammar.llm.llm_service import LLMService


@pytest.fixture
def mock_base_llm_service():
    service = create_autospec(BaseLLMService, instance=True)
    service.create_llm_chain.return_value = MagicMock(name='chain')
    return service


@pytest.fixture
def make_fake_llm_service():
    """LLMService whose chat model replays the given completions."""

    def _make_fake_llm_service(*responses: str) -> LLMService:
        service = LLMService(
            openai_api_key='test-key', model_name='test-model'
        )
        service.model = FakeListChatModel(responses=list(responses))
        return service

    return _make_fake_llm_service
