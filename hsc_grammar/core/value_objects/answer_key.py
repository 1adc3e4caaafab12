from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

RULE_KEY_SUFFIX = '_rule'


class AnswerKeyEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str = Field(description='Canonical correct answer')
    rule: str = Field(
        default='', description='Grammar rule explaining the answer'
    )


AnswerKey = Dict[str, AnswerKeyEntry]


def to_flat_answer_key(answer_key: AnswerKey) -> Dict[str, str]:
    """
    Renders the answer key in the flat form used by the grading prompt:
    ``{"1": "went", "1_rule": "..."}``.
    """
    flat: Dict[str, str] = {}
    for key_id, entry in answer_key.items():
        flat[key_id] = entry.value
        flat[f'{key_id}{RULE_KEY_SUFFIX}'] = entry.rule
    return flat


def from_flat_answer_key(flat: Dict[str, str]) -> AnswerKey:
    """Inverse of ``to_flat_answer_key``; rule-only ids are dropped."""
    return {
        key_id: AnswerKeyEntry(
            value=value, rule=flat.get(f'{key_id}{RULE_KEY_SUFFIX}', '')
        )
        for key_id, value in flat.items()
        if not key_id.endswith(RULE_KEY_SUFFIX)
    }
