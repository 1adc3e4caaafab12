import pytest

from hsc_grammar.core.enums import PracticeMode, TopicId
from hsc_grammar.llm.generators.prompt_templates import (
    get_topic_instructions,
)


@pytest.mark.parametrize(
    'topic_id',
    [TopicId.COMPLETING, TopicId.TRANSFORMATION, TopicId.VOICE],
)
def test_mode_independent_topics(topic_id):
    assert get_topic_instructions(
        topic_id, PracticeMode.SINGLE
    ) == get_topic_instructions(topic_id, PracticeMode.PASSAGE)


@pytest.mark.parametrize(
    'topic_id',
    [
        TopicId.VERBS,
        TopicId.ARTICLES,
        TopicId.PREPOSITION,
        TopicId.NARRATION,
    ],
)
def test_passage_topics_have_two_templates(topic_id):
    single = get_topic_instructions(topic_id, PracticeMode.SINGLE)
    passage = get_topic_instructions(topic_id, PracticeMode.PASSAGE)

    assert single != passage
    assert 'passage' in passage.lower()


def test_every_topic_has_its_own_instructions():
    instructions = {
        get_topic_instructions(topic_id, mode)
        for topic_id in TopicId
        for mode in PracticeMode
    }

    assert len(instructions) == 11


def test_gap_markers_are_described():
    assert "'[1]'" in get_topic_instructions(
        TopicId.COMPLETING, PracticeMode.SINGLE
    )
    assert "Answer 'x' if none" in get_topic_instructions(
        TopicId.ARTICLES, PracticeMode.PASSAGE
    )
