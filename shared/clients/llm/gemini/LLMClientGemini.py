from shared.clients.llm.LLMClientInterface import LLMClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.models.config import EnvConfig


def _to_gemini_schema(schema: dict) -> dict:
    """Convert a JSON schema to the OpenAPI subset Gemini expects (upper-case type names).

    Args:
        schema (dict): A JSON schema using "object", "array", "string", ...

    Returns:
        dict: The same schema with every "type" upper-cased, recursively.
    """
    converted: dict = {}
    for key, value in schema.items():
        if key == "type" and isinstance(value, str):
            converted[key] = value.upper()
        elif key == "properties" and isinstance(value, dict):
            converted[key] = {name: _to_gemini_schema(sub) for name, sub in value.items()}
        elif key == "items" and isinstance(value, dict):
            converted[key] = _to_gemini_schema(value)
        else:
            converted[key] = value
    return converted


class LLMClientGemini(LLMClientInterface):
    def __init__(self, helper_config: HelperConfig):
        super().__init__(helper_config=helper_config)
        self._base_url = self.get_config_val(
            "BASE_URL", default="https://generativelanguage.googleapis.com", val_type="string"
        )
        self._api_key = self.get_config_val("API_KEY", default=None, val_type="string")
        self._api_version = self.get_config_val("API_VERSION", default="v1beta", val_type="string")

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_engine_name(self) -> str:
        return "Gemini"

    def _get_default_search_model(self) -> str:
        return "gemini-3-pro-preview"

    def _get_default_translate_model(self) -> str:
        return "gemini-3-flash-preview"

    ################ CONFIG ##################
    def _get_required_config(self) -> list[EnvConfig]:
        return [
            EnvConfig(env_key="API_KEY", val_type="string", default=None),
            EnvConfig(env_key="BASE_URL", val_type="string", default="https://generativelanguage.googleapis.com"),
            EnvConfig(env_key="API_VERSION", val_type="string", default="v1beta"),
        ]

    ################ AUTH ##################
    def _get_auth_header(self) -> dict:
        return {"x-goog-api-key": self._api_key}

    ################ ENDPOINTS ##################
    def _get_base_url(self) -> str:
        return self._base_url

    def _get_endpoint_healthcheck(self) -> str:
        return f"/{self._api_version}/models"

    def _get_endpoint_generate(self, model: str) -> str:
        return f"/{self._api_version}/models/{model}:generateContent"

    ################ PAYLOAD BUILDER ##################
    def get_generate_payload(self, prompt: str, model: str, response_schema: dict | None = None) -> dict:
        """Build the Gemini generateContent request body.

        The model name travels in the URL, not in the body.

        Returns:
            dict: {"contents": [...][, "generationConfig": {...}]}
        """
        body: dict = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        if response_schema is not None:
            body["generationConfig"] = {
                "responseMimeType": "application/json",
                "responseSchema": _to_gemini_schema(response_schema),
            }
        return body

    ##########################################
    ################# OTHER ##################
    ##########################################

    def extract_generate_response(self, response_data: dict) -> str:
        """Concatenate the text parts of the first candidate of a generateContent response.

        Raises:
            ValueError: If the response carries no candidate text (e.g. blocked prompt).
        """
        candidates = response_data.get("candidates") or []
        if not candidates:
            raise ValueError(
                "Gemini response does not contain any candidates. "
                "Response keys: %s" % list(response_data.keys())
            )
        parts = (candidates[0].get("content") or {}).get("parts") or []
        texts = [part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)]
        if not texts:
            raise ValueError(
                "Gemini candidate does not contain text (finishReason=%s)." % candidates[0].get("finishReason")
            )
        return "".join(texts)
