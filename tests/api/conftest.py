from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hsc_grammar.api.dependencies import get_optional_llm_service
from hsc_grammar.main import app


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url='http://test'
    ) as ac:
        yield ac


@pytest.fixture
def override_llm_service(mock_llm_provider):
    """Serve the mocked provider to every endpoint."""
    app.dependency_overrides[get_optional_llm_service] = (
        lambda: mock_llm_provider
    )
    yield mock_llm_provider
    app.dependency_overrides.clear()


@pytest.fixture
def without_llm_service():
    app.dependency_overrides[get_optional_llm_service] = lambda: None
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def articles_question_data():
    return {
        'topicId': 'ARTICLES',
        'mode': 'PASSAGE',
        'difficulty': 'EASY',
        'questionText': 'He is __ honest man. __ sun rises in __ east.',
        'instruction': 'Fill in the gaps with articles.',
        'gaps': [1, 2, 3],
        'answerKey': {
            '1': {'value': 'an', 'rule': 'Silent h এর আগে an বসে।'},
            '2': {'value': 'The', 'rule': 'Unique জিনিসের আগে the বসে।'},
            '3': {'value': 'the', 'rule': 'দিকের নামের আগে the বসে।'},
        },
    }
