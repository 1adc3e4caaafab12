import pytest

from hsc_grammar.core.enums import EvaluatorKind, TopicId
from hsc_grammar.core.services.local_evaluator import (
    LocalEvaluator,
    calculate_score,
    feedback_for_score,
)

MASTERED = 'Excellent! You mastered this rule.'
VERY_GOOD = 'Very good! Just a few mistakes.'
GOOD_ATTEMPT = 'Good attempt. Review the rules below.'
STUDY_AND_RETRY = 'Study the rules and try again.'


@pytest.fixture
def evaluator():
    return LocalEvaluator()


def test_partially_correct_submission(evaluator, verbs_question):
    result = evaluator.evaluate(
        verbs_question, {'1': 'go', '2': 'went', '3': 'wrong'}
    )

    assert result.overall_score == 67
    assert result.overall_feedback == GOOD_ATTEMPT
    assert result.details['1'].is_correct is True
    assert result.details['2'].is_correct is True
    assert result.details['3'].is_correct is False
    assert result.details['3'].correct_answer == 'gone'
    assert result.details['3'].explanation == (
        'Rule: Perfect tense takes past participle.'
    )
    assert result.evaluated_by == EvaluatorKind.LOCAL


def test_empty_submission_scores_zero(evaluator, make_question):
    question = make_question(
        topic_id=TopicId.ARTICLES,
        gaps=[1, 2, 3, 4],
        answers={
            '1': ('a', 'Consonant sound.'),
            '2': ('an', 'Vowel sound.'),
            '3': ('the', 'Specific noun.'),
            '4': ('x', 'No article before meals.'),
        },
    )

    result = evaluator.evaluate(question, {})

    assert result.overall_score == 0
    assert result.overall_feedback == STUDY_AND_RETRY
    assert list(result.details) == ['1', '2', '3', '4']
    assert not any(detail.is_correct for detail in result.details.values())


def test_fully_correct_submission(evaluator, verbs_question):
    result = evaluator.evaluate(
        verbs_question, {'1': ' Go ', '2': 'WENT', '3': 'gone.'}
    )

    assert result.overall_score == 100
    assert result.overall_feedback == MASTERED


def test_missing_answer_key_entry_is_incorrect(evaluator, make_question):
    question = make_question(
        gaps=[1, 2],
        answers={'1': ('went', 'Past tense.')},
    )

    result = evaluator.evaluate(question, {'1': 'went', '2': ''})

    assert result.overall_score == 50
    assert result.details['2'].is_correct is False
    assert result.details['2'].correct_answer == 'N/A'
    assert result.details['2'].explanation == (
        'Rule: Follow the grammar rules.'
    )


def test_empty_rule_falls_back_to_generic_rule(evaluator, make_question):
    question = make_question(gaps=[1], answers={'1': ('went', '')})

    result = evaluator.evaluate(question, {'1': 'went'})

    assert result.details['1'].explanation == (
        'Rule: Follow the grammar rules.'
    )


@pytest.mark.parametrize('gaps', [None, []])
def test_question_without_gaps_checks_main_key(
    evaluator, make_question, gaps
):
    question = make_question(
        topic_id=TopicId.PREPOSITION,
        gaps=gaps,
        answers={'main': ('with', 'Angry with a person.')},
    )

    result = evaluator.evaluate(question, {'main': 'With'})

    assert list(result.details) == ['main']
    assert result.overall_score == 100


def test_answers_for_unknown_gaps_are_ignored(evaluator, verbs_question):
    result = evaluator.evaluate(
        verbs_question,
        {'1': 'go', '2': 'went', '3': 'gone', '99': 'extra'},
    )

    assert result.overall_score == 100
    assert '99' not in result.details


@pytest.mark.parametrize(
    'correct_count, total_count, expected',
    [
        (2, 3, 67),
        (1, 3, 33),
        (1, 2, 50),
        (1, 8, 13),
        (0, 4, 0),
        (4, 4, 100),
        (0, 0, 0),
    ],
)
def test_calculate_score(correct_count, total_count, expected):
    assert calculate_score(correct_count, total_count) == expected


@pytest.mark.parametrize(
    'score, expected',
    [
        (100, MASTERED),
        (99, VERY_GOOD),
        (80, VERY_GOOD),
        (79, GOOD_ATTEMPT),
        (50, GOOD_ATTEMPT),
        (49, STUDY_AND_RETRY),
        (0, STUDY_AND_RETRY),
    ],
)
def test_feedback_tiers(score, expected):
    assert feedback_for_score(score) == expected
