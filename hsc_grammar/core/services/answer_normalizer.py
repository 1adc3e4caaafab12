import re

_NON_WORD_CHARS = re.compile(r'\W')


def _strip_non_word_chars(text: str) -> str:
    return _NON_WORD_CHARS.sub('', text)


def answers_match(user_answer: str, correct_answer: str) -> bool:
    """
    Compares a learner's answer with the canonical one.

    Case and surrounding whitespace are ignored. If the texts still differ,
    everything except letters, digits and underscores is dropped and the
    remainders are compared, so "x.", "(x)" and "X" all match "x".
    """
    user_value = (user_answer or '').strip().lower()
    correct_value = (correct_answer or '').strip().lower()

    if user_value == correct_value:
        return True

    return _strip_non_word_chars(user_value) == _strip_non_word_chars(
        correct_value
    )
