from fastapi import FastAPI

from src.config.http import install_http_layer
from src.config.logger import setup_logging
from src.config.settings import get_settings
from src.modules.catalog.router import router as catalog_router
from src.modules.completion.router import router as completion_router
from src.modules.crawl.router import router as crawl_router
from src.modules.models_list.router import router as models_router
from src.modules.search.router import router as search_router

setup_logging(get_settings().log_level)

app = FastAPI(title="Agent Builder Gateway Proxy")
install_http_layer(app)

# API routes
app.include_router(completion_router, prefix="/chat-completions", tags=["completion"])
app.include_router(models_router, tags=["models"])
app.include_router(search_router, prefix="/search", tags=["search"])
app.include_router(crawl_router, prefix="/crawl-status", tags=["crawl"])
app.include_router(catalog_router, tags=["catalog"])


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("src.main:app", host=settings.app_host, port=settings.app_port)
