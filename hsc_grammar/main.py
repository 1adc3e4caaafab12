import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI, Request
from prometheus_fastapi_instrumentator import Instrumentator

from hsc_grammar.api.v1.api import api_router
from hsc_grammar.config import settings
from hsc_grammar.llm.llm_service import LLMService
from hsc_grammar.logging_config import configure_logging
from hsc_grammar.sentry_sdk import sentry_init

configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, Any]:
    if not settings.debug:
        sentry_init()

    try:
        app.state.llm_service = LLMService()
    except ValueError as e:
        logger.error(f'LLM service is disabled: {e}')
        app.state.llm_service = None

    logger.info('Application startup complete.')
    yield
    logger.info('Application shutdown complete.')


app = FastAPI(title='HSC Grammar Practice API', lifespan=lifespan)

Instrumentator().instrument(app).expose(app)

app.include_router(api_router, prefix='/api/v1')


@app.get('/info')
async def info(request: Request):
    return {
        'status': 'ok',
        'llm_configured': getattr(request.app.state, 'llm_service', None)
        is not None,
    }


if __name__ == '__main__':
    import uvicorn

    uvicorn.run('hsc_grammar.main:app', reload=True)
