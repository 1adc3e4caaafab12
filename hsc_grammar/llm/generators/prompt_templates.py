from typing import Dict, Tuple, Union

from hsc_grammar.core.enums import PracticeMode, TopicId

BASE_SYSTEM_PROMPT_FOR_GENERATION = (
    'You are an expert database of **Bangladesh HSC Board Exams** and '
    '**University Admission Tests**.\n'
    'CRITICAL INSTRUCTION:\n'
    '1. Do NOT just generate generic sentences about Bangladesh.\n'
    '2. You MUST retrieve or simulate **ACTUAL QUESTIONS** that appeared in '
    'past HSC Board Exams (e.g., Dhaka Board, Rajshahi Board, Comilla '
    'Board, etc.) or University Admission Tests (Dhaka University, '
    'Chittagong University, etc.).\n'
    '3. The language, structure, and complexity must match these exams '
    'exactly.\n'
    '4. If exact questions are not available, create high-quality '
    'simulations that look exactly like Board Questions.\n\n'
    'Topic: {topic}.\n\n'
    '{topic_instructions}\n\n'
    'IMPORTANT:\n'
    "1. You MUST provide the 'answers' array.\n"
    "2. For EACH answer, the 'rule' property MUST be written in **mixed "
    'Bangla and English** (e.g., "Sentence টি Past tense এ থাকায় verb এর '
    'Past form হবে"). Explain clearly WHY the answer is correct according '
    'to grammar rules.\n'
    '3. For Verbs/Articles/Prepositions, the answer must be the exact '
    'word(s).\n'
    "4. For gap-fills, list every gap number in 'gaps' and give one answer "
    "per gap whose 'id' is that number as a string. For single-answer "
    "questions omit 'gaps' and use the id 'main'.\n"
    'Output format instructions: {format_instructions}'
)

USER_PROMPT_FOR_GENERATION = (
    'Generate a {difficulty} level {mode} practice question.'
)

VERBS_PASSAGE_INSTRUCTIONS = (
    "Provide a complete 'Right Form of Verbs' passage from a past **HSC "
    'Board Exam** (e.g., Dhaka Board 2019, Rajshahi Board 2022) or other '
    "from internet. Format: '...word (verb)...'. It must be a narrative "
    'text or factual report.'
)
VERBS_SINGLE_INSTRUCTIONS = (
    'Provide a single challenging sentence question from a **University '
    'Admission Test** (Unit B/C) regarding Right Form of Verbs. '
    "Format: '...(base-verb)...'."
)
ARTICLES_PASSAGE_INSTRUCTIONS = (
    'Provide a standard **HSC Board Question** passage with 6-10 article '
    "gaps. Format: '...__...'. Answer 'x' if none."
)
ARTICLES_SINGLE_INSTRUCTIONS = (
    'Provide a tricky sentence from an **Admission Test** with one article '
    "gap '...__...'. Answer 'x' if none."
)
PREPOSITION_PASSAGE_INSTRUCTIONS = (
    'Provide a passage on Appropriate Prepositions from a past **HSC Board '
    "Exam**. Format: '...word __...'. This is Question No. 2 in HSC exams."
)
PREPOSITION_SINGLE_INSTRUCTIONS = (
    'Provide a single sentence with a challenging Appropriate Preposition '
    "gap '__...' typical of **University Admission Tests**."
)
COMPLETING_INSTRUCTIONS = (
    'Provide a standard **HSC Completing Sentence** question (Question No. '
    '4 style). Start with a clause, leave the rest blank marked as '
    "'[1]'. Example: 'Had I been a king, [1].' The completion must follow "
    'strict grammar rules.'
)
TRANSFORMATION_INSTRUCTIONS = (
    'Provide a **Transformation of Sentence** question from a past **HSC '
    "Board Exam** (Question No. 6). 'questionText' MUST be the sentence "
    "ONLY. 'instruction' MUST be the target type (e.g. 'Make it Compound', "
    "'Make it Positive')."
)
NARRATION_PASSAGE_INSTRUCTIONS = (
    'Provide a **Narration (Passage)** question from a past **HSC Board '
    'Exam** (Question No. 5). It must be a dialogue or narrative text in '
    'Direct Speech to be changed to Indirect.'
)
NARRATION_SINGLE_INSTRUCTIONS = (
    'Provide a single Direct Speech sentence to change to Indirect, '
    'typical of Admission Tests.'
)
VOICE_INSTRUCTIONS = (
    'Provide a **Voice Change** question from a past Board or Admission '
    "exam. 'questionText' MUST be the sentence ONLY. 'instruction' MUST be "
    'the target direction.'
)
DEFAULT_INSTRUCTIONS = 'Provide an HSC standard grammar question.'

# str: same template for both modes; tuple: (SINGLE, PASSAGE)
TOPIC_INSTRUCTIONS: Dict[TopicId, Union[str, Tuple[str, str]]] = {
    TopicId.VERBS: (VERBS_SINGLE_INSTRUCTIONS, VERBS_PASSAGE_INSTRUCTIONS),
    TopicId.ARTICLES: (
        ARTICLES_SINGLE_INSTRUCTIONS,
        ARTICLES_PASSAGE_INSTRUCTIONS,
    ),
    TopicId.PREPOSITION: (
        PREPOSITION_SINGLE_INSTRUCTIONS,
        PREPOSITION_PASSAGE_INSTRUCTIONS,
    ),
    TopicId.NARRATION: (
        NARRATION_SINGLE_INSTRUCTIONS,
        NARRATION_PASSAGE_INSTRUCTIONS,
    ),
    TopicId.COMPLETING: COMPLETING_INSTRUCTIONS,
    TopicId.TRANSFORMATION: TRANSFORMATION_INSTRUCTIONS,
    TopicId.VOICE: VOICE_INSTRUCTIONS,
}


def get_topic_instructions(topic_id: TopicId, mode: PracticeMode) -> str:
    instructions = TOPIC_INSTRUCTIONS.get(topic_id, DEFAULT_INSTRUCTIONS)
    if isinstance(instructions, str):
        return instructions
    single, passage = instructions
    return passage if mode == PracticeMode.PASSAGE else single
