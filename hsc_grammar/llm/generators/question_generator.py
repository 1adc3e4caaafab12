import logging
from typing import Any, Dict, List, Optional, Tuple

from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, ConfigDict, Field

from hsc_grammar.config import settings
from hsc_grammar.core.entities.generation_result import (
    GenerationFailed,
    GenerationResult,
    QuestionGenerated,
)
from hsc_grammar.core.entities.practice_question import PracticeQuestion
from hsc_grammar.core.enums import DifficultyLevel, PracticeMode, TopicId
from hsc_grammar.core.value_objects.answer_key import AnswerKeyEntry
from hsc_grammar.llm.generators.prompt_templates import (
    BASE_SYSTEM_PROMPT_FOR_GENERATION,
    USER_PROMPT_FOR_GENERATION,
    get_topic_instructions,
)
from hsc_grammar.llm.llm_base import BaseLLMService

logger = logging.getLogger(__name__)


class GeneratedAnswer(BaseModel):
    # ids may arrive as JSON numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str = Field(description="The gap number (e.g. '1') or 'main'.")
    value: str = Field(description='The correct answer string.')
    rule: str = Field(description='Grammar rule in mixed Bangla and English.')


class GeneratedQuestionLLMOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question_text: str = Field(
        alias='questionText',
        description=(
            'The content. For gap-fills like Right Form of Verbs, the '
            "format is '...(verb)...'. Do not include numbers in the "
            "question text's gaps. For Transformation/Voice, provide ONLY "
            'the sentence to change.'
        ),
    )
    instruction: str = Field(
        description=(
            "Short instruction (e.g. 'Change to Passive', "
            "'Make it Compound')."
        ),
    )
    gaps: Optional[List[int]] = Field(
        default=None,
        description='List of gap numbers e.g. [1, 2, 3].',
    )
    answers: List[GeneratedAnswer] = Field(
        min_length=1,
        description='List of correct answers and rules.',
    )


def build_answer_key(
    answers: List[GeneratedAnswer],
) -> Dict[str, AnswerKeyEntry]:
    answer_key: Dict[str, AnswerKeyEntry] = {}
    for answer in answers:
        answer_key[answer.id.strip()] = AnswerKeyEntry(
            value=answer.value, rule=answer.rule
        )
    return answer_key


class QuestionGenerator:
    def __init__(self, llm_service: BaseLLMService):
        self.llm_service = llm_service

    def build_prompt(
        self,
        topic_id: TopicId,
        mode: PracticeMode,
        difficulty: DifficultyLevel,
    ) -> Tuple[ChatPromptTemplate, PydanticOutputParser, Dict[str, Any]]:
        parser = PydanticOutputParser(
            pydantic_object=GeneratedQuestionLLMOutput
        )

        chat_prompt = ChatPromptTemplate.from_messages(
            [
                ('system', BASE_SYSTEM_PROMPT_FOR_GENERATION),
                ('user', USER_PROMPT_FOR_GENERATION),
            ]
        )

        request_data = {
            'topic': topic_id.value,
            'topic_instructions': get_topic_instructions(topic_id, mode),
            'difficulty': difficulty.value,
            'mode': mode.value,
            'format_instructions': parser.get_format_instructions(),
        }
        return chat_prompt, parser, request_data

    async def generate(
        self,
        topic_id: TopicId,
        mode: PracticeMode,
        difficulty: DifficultyLevel,
    ) -> GenerationResult:
        """
        Generate a practice question for the topic, mode and difficulty.

        Never raises: any failure of the LLM call or of its output is
        reported as ``GenerationFailed`` carrying the error question.
        """
        try:
            chat_prompt, parser, request_data = self.build_prompt(
                topic_id, mode, difficulty
            )
            chain = await self.llm_service.create_llm_chain(
                chat_prompt,
                parser,
                max_tokens=settings.generation_max_tokens,
                json_mode=True,
            )
            llm_output: GeneratedQuestionLLMOutput = (
                await self.llm_service.run_llm_chain(
                    chain=chain,
                    input_data=request_data,
                )
            )
            if not isinstance(llm_output, GeneratedQuestionLLMOutput):
                raise ValueError(
                    f'Unexpected LLM output: {type(llm_output).__name__}'
                )

            question = PracticeQuestion(
                topic_id=topic_id,
                mode=mode,
                difficulty=difficulty,
                question_text=llm_output.question_text,
                instruction=llm_output.instruction,
                gaps=llm_output.gaps,
                answer_key=build_answer_key(llm_output.answers),
            )
        except Exception as e:
            logger.error(
                f'Question generation failed for {topic_id.value} '
                f'{mode.value} {difficulty.value}: {e}',
                exc_info=True,
            )
            return GenerationFailed(
                reason=str(e) or type(e).__name__,
                question=PracticeQuestion.error_question(
                    topic_id=topic_id, mode=mode, difficulty=difficulty
                ),
            )

        self._warn_on_key_mismatch(question)
        logger.debug(f'Generated {question}')
        return QuestionGenerated(question=question)

    @staticmethod
    def _warn_on_key_mismatch(question: PracticeQuestion) -> None:
        missing = [
            key_id
            for key_id in question.keys_to_check()
            if key_id not in question.answer_key
        ]
        if missing:
            logger.warning(
                f'Answer key has no entries for {missing} in {question}'
            )
