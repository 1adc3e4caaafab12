from fastapi import APIRouter

from hsc_grammar.api.v1.endpoints import grammar, questions, topics

api_router = APIRouter()
api_router.include_router(
    topics.router,
    prefix='/topics',
    tags=['topics'],
)
api_router.include_router(
    questions.router,
    prefix='/questions',
    tags=['questions'],
)
api_router.include_router(
    grammar.router,
    prefix='/grammar',
    tags=['grammar'],
)
