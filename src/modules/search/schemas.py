from typing import Any

from pydantic import BaseModel, ConfigDict


class SearchRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    query: str

    def options(self) -> dict[str, Any]:
        return dict(self.model_extra or {})
