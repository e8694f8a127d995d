"""
Wire types of the LLM proxy.
"""
from pydantic import BaseModel, ConfigDict, Field


class ProxyRequest(BaseModel):
    """Body of POST {base_url}/{provider}."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    model_name: str = Field(..., alias="modelName")
