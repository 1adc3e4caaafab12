from typing import Dict, Mapping, Optional

LearnerAnswers = Dict[str, str]


def clean_learner_answers(
    answers: Optional[Mapping[object, Optional[str]]],
) -> LearnerAnswers:
    """Stringifies gap ids and replaces missing inputs with empty strings."""
    if not answers:
        return {}
    return {
        str(key): value if value is not None else ''
        for key, value in answers.items()
    }
