# bug_tracker/models/bugs.py

from pydantic import BaseModel, ConfigDict, Field


class Bug(BaseModel):
    """
    A bug report. The same shape validates POST bodies, serializes responses
    and feeds the OpenAPI schema.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "title": "Crash on save",
                    "description": "App crashes when saving large files",
                }
            ]
        },
    )

    title: str = Field(..., description="Short summary of the bug")
    description: str = Field(..., description="What happens and how to reproduce it")
