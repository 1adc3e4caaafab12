from enum import Enum


class TopicId(str, Enum):
    VERBS = 'VERBS'
    TRANSFORMATION = 'TRANSFORMATION'
    COMPLETING = 'COMPLETING'
    NARRATION = 'NARRATION'
    VOICE = 'VOICE'
    PREPOSITION = 'PREPOSITION'
    ARTICLES = 'ARTICLES'


class PracticeMode(str, Enum):
    SINGLE = 'SINGLE'
    PASSAGE = 'PASSAGE'


class DifficultyLevel(str, Enum):
    EASY = 'EASY'
    MEDIUM = 'MEDIUM'
    HARD = 'HARD'


class EvaluatorKind(str, Enum):
    LOCAL = 'local'
    REMOTE = 'remote'


class GenerationStatus(str, Enum):
    OK = 'ok'
    FAILED = 'failed'
