import pytest

from hsc_grammar.core.services.answer_normalizer import answers_match


@pytest.mark.parametrize(
    'text',
    ['', 'went', '  Went  ', 'x.', '(x)', 'has been living', 'বাংলা'],
)
def test_answer_matches_itself(text):
    assert answers_match(text, text) is True


@pytest.mark.parametrize(
    'user_answer, correct_answer',
    [
        ('X.', 'x'),
        ('x', 'X.'),
        ('(x)', 'x'),
        ('  GONE ', 'gone'),
        ('The', 'the'),
        ('had gone.', 'had gone'),
        ('café!', 'café'),
    ],
)
def test_case_and_punctuation_are_ignored(user_answer, correct_answer):
    assert answers_match(user_answer, correct_answer) is True


@pytest.mark.parametrize(
    'user_answer, correct_answer',
    [
        ('x', 'y'),
        ('a', 'an'),
        ('go', 'went'),
        ('', 'the'),
        ('in', 'into'),
    ],
)
def test_different_words_do_not_match(user_answer, correct_answer):
    assert answers_match(user_answer, correct_answer) is False


def test_none_is_treated_as_empty():
    assert answers_match(None, '') is True
    assert answers_match(None, 'x') is False
