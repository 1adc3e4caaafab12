from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints


class ExplainRequestSchema(BaseModel):
    query: Annotated[
        str,
        StringConstraints(
            strip_whitespace=True, min_length=1, max_length=2000
        ),
    ] = Field(description="Learner's grammar question")


class ExplainResponseSchema(BaseModel):
    explanation: str = Field(description='Free-text explanation')
