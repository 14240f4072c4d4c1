from fastapi import APIRouter

from src.modules.catalog.models import DEFAULT_PROVIDER, PROVIDERS, TOOLS
from src.modules.catalog.schemas import ModelResponse, ProviderResponse, ToolResponse

router = APIRouter()


@router.get("/providers")
async def list_providers() -> dict:
    providers = [
        ProviderResponse(
            id=p.id,
            name=p.name,
            default_model=p.default_model,
            models=[ModelResponse(id=m.id, name=m.name) for m in p.models],
        )
        for p in PROVIDERS.values()
    ]
    return {"providers": providers, "default": DEFAULT_PROVIDER}


@router.get("/tools")
async def list_tools() -> dict:
    tools = [
        ToolResponse(
            id=t.id,
            name=t.name,
            description=t.description,
            provider=t.provider,
            endpoint=t.endpoint,
        )
        for t in TOOLS.values()
    ]
    return {"tools": tools}
