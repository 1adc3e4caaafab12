from abc import ABC, abstractmethod

from hsc_grammar.core.entities.evaluation_result import EvaluationResult
from hsc_grammar.core.entities.generation_result import GenerationResult
from hsc_grammar.core.entities.practice_question import PracticeQuestion
from hsc_grammar.core.enums import DifficultyLevel, PracticeMode, TopicId
from hsc_grammar.core.value_objects.learner_answers import LearnerAnswers


class LLMProvider(ABC):
    @abstractmethod
    async def generate_question(
        self,
        topic_id: TopicId,
        mode: PracticeMode,
        difficulty: DifficultyLevel,
    ) -> GenerationResult:
        pass

    @abstractmethod
    async def evaluate_answers(
        self,
        question: PracticeQuestion,
        answers: LearnerAnswers,
    ) -> EvaluationResult:
        pass

    @abstractmethod
    async def explain_grammar(self, query: str) -> str:
        pass
