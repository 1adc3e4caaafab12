import logging

from hsc_grammar.core.entities.evaluation_result import EvaluationResult
from hsc_grammar.core.entities.generation_result import GenerationResult
from hsc_grammar.core.entities.practice_question import PracticeQuestion
from hsc_grammar.core.enums import DifficultyLevel, PracticeMode, TopicId
from hsc_grammar.core.interfaces.llm_provider import LLMProvider
from hsc_grammar.core.value_objects.learner_answers import LearnerAnswers
from hsc_grammar.llm.evaluators.remote_evaluator import RemoteEvaluator
from hsc_grammar.llm.explainers.grammar_explainer import GrammarExplainer
from hsc_grammar.llm.generators.question_generator import QuestionGenerator
from hsc_grammar.llm.llm_base import BaseLLMService
from hsc_grammar.metrics import (
    BACKEND_EXPLANATION_METRICS,
    BACKEND_GENERATION_METRICS,
)

logger = logging.getLogger(__name__)


class LLMService(BaseLLMService, LLMProvider):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.question_generator = QuestionGenerator(llm_service=self)
        self.remote_evaluator = RemoteEvaluator(llm_service=self)
        self.grammar_explainer = GrammarExplainer(llm_service=self)

    async def generate_question(
        self,
        topic_id: TopicId,
        mode: PracticeMode,
        difficulty: DifficultyLevel,
    ) -> GenerationResult:
        """Generate a practice question with its answer key."""
        labels = {
            'topic': topic_id.value,
            'mode': mode.value,
            'difficulty': difficulty.value,
            'llm_model': self.model_name,
        }
        with (
            BACKEND_GENERATION_METRICS['generation_time']
            .labels(**labels)
            .time()
        ):
            result = await self.question_generator.generate(
                topic_id=topic_id,
                mode=mode,
                difficulty=difficulty,
            )

        if result.is_ok:
            BACKEND_GENERATION_METRICS['generated'].labels(**labels).inc()
        else:
            BACKEND_GENERATION_METRICS['failed'].labels(**labels).inc()

        return result

    async def evaluate_answers(
        self,
        question: PracticeQuestion,
        answers: LearnerAnswers,
    ) -> EvaluationResult:
        """Grade learner answers with the LLM."""
        return await self.remote_evaluator.evaluate(question, answers)

    async def explain_grammar(self, query: str) -> str:
        BACKEND_EXPLANATION_METRICS['explanations'].labels(
            llm_model=self.model_name
        ).inc()
        return await self.grammar_explainer.explain(query)
