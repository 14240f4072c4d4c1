from pydantic import BaseModel


class ModelResponse(BaseModel):
    id: str
    name: str


class ProviderResponse(BaseModel):
    id: str
    name: str
    default_model: str
    models: list[ModelResponse]


class ToolResponse(BaseModel):
    id: str
    name: str
    description: str
    provider: str
    endpoint: str
