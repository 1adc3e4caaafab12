import logging
import time
from typing import Mapping, Optional

from hsc_grammar.core.configs.topics import get_topic
from hsc_grammar.core.entities.evaluation_result import EvaluationResult
from hsc_grammar.core.entities.practice_question import PracticeQuestion
from hsc_grammar.core.enums import EvaluatorKind
from hsc_grammar.core.interfaces.llm_provider import LLMProvider
from hsc_grammar.core.services.local_evaluator import LocalEvaluator
from hsc_grammar.core.value_objects.learner_answers import (
    clean_learner_answers,
)
from hsc_grammar.metrics import BACKEND_EVALUATION_METRICS

logger = logging.getLogger(__name__)


def uses_local_evaluation(question: PracticeQuestion) -> bool:
    """
    A question is graded locally when its topic can be checked by string
    comparison and the question carries an answer key.
    """
    topic = get_topic(question.topic_id)
    return (
        topic.supports_deterministic_grading and question.has_answer_key()
    )


class EvaluationDispatcher:
    def __init__(
        self,
        llm_service: Optional[LLMProvider],
        local_evaluator: Optional[LocalEvaluator] = None,
    ):
        self.llm_service = llm_service
        self.local_evaluator = local_evaluator or LocalEvaluator()

    async def evaluate(
        self,
        question: PracticeQuestion,
        answers: Optional[Mapping[object, Optional[str]]],
    ) -> EvaluationResult:
        """Route the submission to the local or the LLM evaluator."""
        learner_answers = clean_learner_answers(answers)
        evaluator = (
            EvaluatorKind.LOCAL
            if uses_local_evaluation(question)
            else EvaluatorKind.REMOTE
        )
        logger.debug(
            f'Evaluating {question} with {evaluator.value} evaluator'
        )

        started_at = time.perf_counter()
        if evaluator == EvaluatorKind.LOCAL:
            result = self.local_evaluator.evaluate(question, learner_answers)
        elif self.llm_service is None:
            logger.error(
                f'Cannot evaluate {question} remotely: '
                f'LLM service is not configured'
            )
            result = EvaluationResult.failed()
        else:
            result = await self.llm_service.evaluate_answers(
                question, learner_answers
            )
        elapsed = time.perf_counter() - started_at

        labels = {
            'topic': question.topic_id.value,
            'evaluator': evaluator.value,
        }
        BACKEND_EVALUATION_METRICS['evaluated'].labels(**labels).inc()
        BACKEND_EVALUATION_METRICS['evaluation_time'].labels(
            **labels
        ).observe(elapsed)
        BACKEND_EVALUATION_METRICS['score'].labels(**labels).observe(
            result.overall_score
        )

        return result
