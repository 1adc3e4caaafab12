from enum import Enum
from typing import Dict


class Messages(str, Enum):
    FEEDBACK_MASTERED = 'feedback_mastered'
    FEEDBACK_VERY_GOOD = 'feedback_very_good'
    FEEDBACK_GOOD_ATTEMPT = 'feedback_good_attempt'
    FEEDBACK_STUDY_AND_RETRY = 'feedback_study_and_retry'
    DEFAULT_RULE = 'default_rule'
    MISSING_CORRECT_ANSWER = 'missing_correct_answer'
    EVALUATION_ERROR = 'evaluation_error'
    ERROR_QUESTION_TEXT = 'error_question_text'
    ERROR_QUESTION_INSTRUCTION = 'error_question_instruction'
    EXPLANATION_EMPTY = 'explanation_empty'
    EXPLANATION_ERROR = 'explanation_error'


MESSAGES: Dict[Messages, str] = {
    Messages.FEEDBACK_MASTERED: 'Excellent! You mastered this rule.',
    Messages.FEEDBACK_VERY_GOOD: 'Very good! Just a few mistakes.',
    Messages.FEEDBACK_GOOD_ATTEMPT: 'Good attempt. Review the rules below.',
    Messages.FEEDBACK_STUDY_AND_RETRY: 'Study the rules and try again.',
    Messages.DEFAULT_RULE: 'Follow the grammar rules.',
    Messages.MISSING_CORRECT_ANSWER: 'N/A',
    Messages.EVALUATION_ERROR: 'Error checking answer.',
    Messages.ERROR_QUESTION_TEXT: 'Error, Refresh!',
    Messages.ERROR_QUESTION_INSTRUCTION: 'Error',
    Messages.EXPLANATION_EMPTY: 'Sorry, I could not generate an explanation.',
    Messages.EXPLANATION_ERROR: (
        'Something went wrong. Please try asking again.'
    ),
}


def get_text(message: Messages, **kwargs) -> str:
    text = MESSAGES[message]
    if kwargs:
        return text.format(**kwargs)
    return text
