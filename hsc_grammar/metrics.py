from prometheus_client import Counter, Histogram

METRIC_PREFIX = 'backend_'

backend_generation_metrics_label_names = [
    'topic',
    'mode',
    'difficulty',
    'llm_model',
]
BACKEND_GENERATION_METRICS = {
    'generated': Counter(
        METRIC_PREFIX + 'question_generated_total',
        'Total number of practice questions generated by LLM',
        labelnames=backend_generation_metrics_label_names,
    ),
    'failed': Counter(
        METRIC_PREFIX + 'question_generation_failed_total',
        'Total number of question generations replaced by the error question',
        labelnames=backend_generation_metrics_label_names,
    ),
    'generation_time': Histogram(
        METRIC_PREFIX + 'question_generation_time_seconds',
        'Time spent for generation a practice question by LLM',
        labelnames=backend_generation_metrics_label_names,
        buckets=(1, 2, 3, 5, 7, 9, 11, 13, 15, 20, 30),
    ),
}

backend_evaluation_metrics_label_names = [
    'topic',
    'evaluator',
]
BACKEND_EVALUATION_METRICS = {
    'evaluated': Counter(
        METRIC_PREFIX + 'answer_evaluated_total',
        'Total number of evaluated learner submissions',
        labelnames=backend_evaluation_metrics_label_names,
    ),
    'evaluation_time': Histogram(
        METRIC_PREFIX + 'answer_evaluation_time_seconds',
        "Time spent evaluating a learner's submission",
        labelnames=backend_evaluation_metrics_label_names,
        buckets=(0.005, 0.01, 0.05, 0.1, 0.5, 1, 2, 5, 10, 15, 30),
    ),
    'score': Histogram(
        METRIC_PREFIX + 'answer_score',
        'Overall score of evaluated submissions',
        labelnames=backend_evaluation_metrics_label_names,
        buckets=(0, 20, 40, 50, 60, 80, 90, 100),
    ),
}

BACKEND_EXPLANATION_METRICS = {
    'explanations': Counter(
        METRIC_PREFIX + 'grammar_explanations_total',
        'Total number of free-form grammar explanations requested',
        labelnames=['llm_model'],
    ),
}
