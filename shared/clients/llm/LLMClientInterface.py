from abc import abstractmethod

from shared.clients.ClientInterface import ClientInterface
from shared.helper.HelperConfig import HelperConfig


class LLMClientInterface(ClientInterface):
    def __init__(self, helper_config: HelperConfig):
        super().__init__(helper_config=helper_config)

        # model per task; the translation model is the cheaper one by default
        self.search_model = helper_config.get_string_val(
            f"{self.get_client_type().upper()}_SEARCH_MODEL", default=self._get_default_search_model()
        )
        self.translate_model = helper_config.get_string_val(
            f"{self.get_client_type().upper()}_TRANSLATE_MODEL", default=self._get_default_translate_model()
        )

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_client_type(self) -> str:
        return "llm"

    @abstractmethod
    def _get_default_search_model(self) -> str:
        pass

    @abstractmethod
    def _get_default_translate_model(self) -> str:
        pass

    ################ ENDPOINTS ##################
    @abstractmethod
    def _get_endpoint_generate(self, model: str) -> str:
        """Returns the endpoint path for a single-prompt generation with the given model."""
        pass

    ################ PAYLOAD BUILDER ##################
    @abstractmethod
    def get_generate_payload(self, prompt: str, model: str, response_schema: dict | None = None) -> dict:
        """Build the backend-specific request body for a single-prompt generation.

        Args:
            prompt (str): The full prompt text.
            model (str): The model to run.
            response_schema (dict | None): JSON schema the reply must follow. None requests plain text.

        Returns:
            dict: JSON-serialisable request body.
        """
        pass

    ##########################################
    ################# OTHER ##################
    ##########################################

    @abstractmethod
    def extract_generate_response(self, response_data: dict) -> str:
        """Extract the reply text from a raw generation response.

        Raises:
            ValueError: If the response does not contain a reply.
        """
        pass

    ##########################################
    ############### REQUESTS #################
    ##########################################

    async def do_generate(self, prompt: str, model: str, response_schema: dict | None = None) -> str:
        """Send one prompt and return the model's reply text.

        Args:
            prompt (str): The full prompt text.
            model (str): The model to run.
            response_schema (dict | None): Optional JSON schema for structured output.

        Returns:
            str: The reply text (JSON text when a schema was given).

        Raises:
            Exception: If the HTTP request fails or returns a non-2xx status.
            ValueError: If the response does not contain a reply.
        """
        body = self.get_generate_payload(prompt=prompt, model=model, response_schema=response_schema)
        response = await self.do_request(
            method="POST",
            endpoint=self._get_endpoint_generate(model),
            json=body,
            raise_on_error=True,
        )
        return self.extract_generate_response(response.json())
