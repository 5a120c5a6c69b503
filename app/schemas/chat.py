from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str | None = None
    context_id: str | None = Field(default=None, alias="contextId")


class ChatResponse(BaseModel):
    reply: str
