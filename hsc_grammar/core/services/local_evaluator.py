import logging
import math
from typing import Dict, Mapping

from hsc_grammar.core.entities.evaluation_result import (
    EvaluationResult,
    GapEvaluation,
)
from hsc_grammar.core.entities.practice_question import PracticeQuestion
from hsc_grammar.core.enums import EvaluatorKind
from hsc_grammar.core.services.answer_normalizer import answers_match
from hsc_grammar.core.texts import Messages, get_text

logger = logging.getLogger(__name__)


def calculate_score(correct_count: int, total_count: int) -> int:
    """Percentage of correct gaps, rounded half up; 0 when nothing to check."""
    if total_count <= 0:
        return 0
    return int(math.floor(100 * correct_count / total_count + 0.5))


def feedback_for_score(score: int) -> str:
    if score == 100:
        return get_text(Messages.FEEDBACK_MASTERED)
    if score >= 80:
        return get_text(Messages.FEEDBACK_VERY_GOOD)
    if score >= 50:
        return get_text(Messages.FEEDBACK_GOOD_ATTEMPT)
    return get_text(Messages.FEEDBACK_STUDY_AND_RETRY)


class LocalEvaluator:
    """Scores gap-fill answers against the embedded answer key."""

    def evaluate(
        self,
        question: PracticeQuestion,
        answers: Mapping[str, str],
    ) -> EvaluationResult:
        keys_to_check = question.keys_to_check()
        details: Dict[str, GapEvaluation] = {}
        correct_count = 0

        for key_id in keys_to_check:
            user_value = answers.get(key_id) or ''
            entry = question.answer_key.get(key_id)
            correct_value = entry.value if entry else ''
            rule = (entry.rule if entry else '') or get_text(
                Messages.DEFAULT_RULE
            )

            if not correct_value:
                logger.debug(
                    f'No answer key entry for gap {key_id} in {question}'
                )

            # a gap without a canonical answer is never correct
            is_correct = bool(correct_value) and answers_match(
                user_value, correct_value
            )
            if is_correct:
                correct_count += 1

            details[key_id] = GapEvaluation(
                is_correct=is_correct,
                correct_answer=correct_value
                or get_text(Messages.MISSING_CORRECT_ANSWER),
                explanation=f'Rule: {rule}',
            )

        score = calculate_score(correct_count, len(keys_to_check))

        return EvaluationResult(
            overall_score=score,
            overall_feedback=feedback_for_score(score),
            details=details,
            evaluated_by=EvaluatorKind.LOCAL,
        )
