from typing import Literal

from pydantic import BaseModel


class EnvConfig(BaseModel):
    """
    Declares one environment setting a client needs.

    Attributes:
        env_key (str): The raw key, prefixed by the client with "{TYPE}_{ENGINE}_" (e.g. "API_KEY" -> "LLM_GEMINI_API_KEY").
        val_type (str): Expected value type: "string", "number", "bool" or "list".
        default (str | int | float | bool | list | None): Value used when unset. None marks the setting as required.
    """

    env_key: str
    val_type: Literal["string", "number", "bool", "list"] = "string"
    default: str | int | float | bool | list | None = None
