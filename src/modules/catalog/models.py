from dataclasses import dataclass


@dataclass(frozen=True)
class ModelInfo:
    id: str
    name: str


@dataclass(frozen=True)
class ProviderInfo:
    id: str
    name: str
    default_model: str
    models: tuple[ModelInfo, ...]


@dataclass(frozen=True)
class ToolInfo:
    id: str
    name: str
    description: str
    provider: str
    endpoint: str


PROVIDERS: dict[str, ProviderInfo] = {p.id: p for p in [
    ProviderInfo(
        id="perplexity",
        name="Perplexity",
        default_model="sonar",
        models=(
            ModelInfo("sonar", "Sonar"),
            ModelInfo("r1-1776", "R1-1776"),
            ModelInfo("sonar-reasoning-pro", "Sonar Reasoning Pro"),
            ModelInfo("sonar-reasoning", "Sonar Reasoning"),
            ModelInfo("sonar-pro", "Sonar Pro"),
        ),
    ),
    ProviderInfo(
        id="openai",
        name="OpenAI",
        default_model="gpt-4o",
        models=(
            ModelInfo("gpt-4o", "GPT-4o"),
            ModelInfo("gpt-4o-mini", "GPT-4o Mini"),
            ModelInfo("gpt-4-turbo", "GPT-4 Turbo"),
            ModelInfo("gpt-3.5-turbo", "GPT-3.5 Turbo"),
        ),
    ),
    ProviderInfo(
        id="anthropic",
        name="Anthropic",
        default_model="claude-3-5-sonnet-20241022",
        models=(
            ModelInfo("claude-3-5-sonnet-20241022", "Claude 3.5 Sonnet"),
            ModelInfo("claude-3-5-haiku-20241022", "Claude 3.5 Haiku"),
            ModelInfo("claude-3-opus-20240229", "Claude 3 Opus"),
            ModelInfo("claude-3-sonnet-20240229", "Claude 3 Sonnet"),
        ),
    ),
]}

TOOLS: dict[str, ToolInfo] = {t.id: t for t in [
    ToolInfo("search", "Web Search", "Search the web for information", "Tavily", "/search"),
    ToolInfo("crawl", "Web Crawl", "Extract content from websites", "Firecrawl", "/crawl-status"),
]}

DEFAULT_PROVIDER = "perplexity"


def default_model_for(provider_id: str) -> str:
    return PROVIDERS[provider_id].default_model
