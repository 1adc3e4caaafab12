from typing import Callable, Dict, List, Optional, Tuple
from unittest.mock import create_autospec

import pytest

from hsc_grammar.core.entities.practice_question import PracticeQuestion
from hsc_grammar.core.enums import DifficultyLevel, PracticeMode, TopicId
from hsc_grammar.core.interfaces.llm_provider import LLMProvider
from hsc_grammar.core.value_objects.answer_key import AnswerKeyEntry


@pytest.fixture
def make_question() -> Callable[..., PracticeQuestion]:
    def _make_question(
        topic_id: TopicId = TopicId.VERBS,
        gaps: Optional[List[int]] = None,
        answers: Optional[Dict[str, Tuple[str, str]]] = None,
        mode: PracticeMode = PracticeMode.PASSAGE,
        question_text: str = 'He (go) home yesterday.',
        instruction: str = 'Use the right form of verbs.',
    ) -> PracticeQuestion:
        return PracticeQuestion(
            topic_id=topic_id,
            mode=mode,
            difficulty=DifficultyLevel.MEDIUM,
            question_text=question_text,
            instruction=instruction,
            gaps=gaps,
            answer_key={
                key_id: AnswerKeyEntry(value=value, rule=rule)
                for key_id, (value, rule) in (answers or {}).items()
            },
        )

    return _make_question


@pytest.fixture
def verbs_question(make_question) -> PracticeQuestion:
    return make_question(
        topic_id=TopicId.VERBS,
        gaps=[1, 2, 3],
        answers={
            '1': ('go', 'Present simple habit.'),
            '2': ('went', 'Past time marker yesterday.'),
            '3': ('gone', 'Perfect tense takes past participle.'),
        },
    )


@pytest.fixture
def mock_llm_provider():
    return create_autospec(LLMProvider, instance=True)
