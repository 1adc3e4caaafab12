import pytest

pytestmark = pytest.mark.asyncio


async def test_get_topics(async_client):
    response = await async_client.get('/api/v1/topics/')

    assert response.status_code == 200
    topics = response.json()
    assert [topic['topicId'] for topic in topics] == [
        'VERBS',
        'TRANSFORMATION',
        'COMPLETING',
        'NARRATION',
        'VOICE',
        'PREPOSITION',
        'ARTICLES',
    ]
    verbs = topics[0]
    assert verbs['name'] == 'Right Form of Verbs'
    assert verbs['allowPassageMode'] is True
    assert verbs['supportsDeterministicGrading'] is True


async def test_info_reports_missing_llm(async_client):
    response = await async_client.get('/info')

    assert response.status_code == 200
    assert response.json() == {'status': 'ok', 'llm_configured': False}
