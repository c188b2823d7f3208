"""The AI capability handed to the gateway: either a live client or an explicit fallback marker."""

from pydantic import BaseModel, ConfigDict

from shared.clients.llm.LLMClientInterface import LLMClientInterface


class RemoteLLM(BaseModel):
    """A constructed (and booted) LLM client."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    client: LLMClientInterface

    def get_mode(self) -> str:
        return "remote"


class FallbackMode(BaseModel):
    """No usable AI service; search uses the local substring match and translation is unavailable."""

    model_config = ConfigDict(frozen=True)

    reason: str

    def get_mode(self) -> str:
        return "fallback"


LLMCapability = RemoteLLM | FallbackMode
