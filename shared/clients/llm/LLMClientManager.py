import httpx

from shared.clients.llm.LLMCapability import FallbackMode, LLMCapability, RemoteLLM
from shared.clients.llm.LLMClientInterface import LLMClientInterface
from shared.helper.HelperConfig import HelperConfig


class LLMClientManager:
    """Instantiates the configured LLM client and decides, once, whether the AI service is usable.

    A missing engine, a missing credential or an unsupported engine name are
    normal conditions: they produce a FallbackMode capability instead of an error.
    """

    def __init__(self, helper_config: HelperConfig):
        self.helper_config = helper_config
        self.logging = helper_config.get_logger()
        self.client: LLMClientInterface | None = None
        self.capability: LLMCapability = self._initialize_capability()

    def _get_engine_from_env(self) -> str | None:
        """Read the LLM engine name from env configuration.

        Returns:
            str | None: Capitalised engine name (e.g. "Gemini"), or None if LLM_ENGINE is unset.
        """
        engine = self.helper_config.get_string_val("LLM_ENGINE", default="")
        if not engine:
            return None
        return engine.strip().lower().capitalize()

    def _initialize_capability(self) -> LLMCapability:
        engine = self._get_engine_from_env()
        if engine is None:
            return self._fallback("No LLM engine configured (LLM_ENGINE).")

        class_name = f"LLMClient{engine}"
        try:
            module = __import__(
                f"shared.clients.llm.{engine.lower()}.{class_name}",
                fromlist=[class_name],
            )
            client_class = getattr(module, class_name)
        except (ImportError, AttributeError) as e:
            return self._fallback("Unsupported LLM engine '%s': %s" % (engine, e))

        try:
            self.client = client_class(helper_config=self.helper_config)
        except ValueError as e:
            return self._fallback("LLM client '%s' is not configured: %s" % (engine, e))

        self.logging.debug("Instantiated LLM client for engine: %s", engine)
        return RemoteLLM(client=self.client)

    def _fallback(self, reason: str) -> FallbackMode:
        self.logging.warning("%s AI search and translation run in fallback mode.", reason)
        return FallbackMode(reason=reason)

    async def do_boot(self, healthcheck: bool = True, transport: httpx.AsyncBaseTransport | None = None) -> LLMCapability:
        """Boot the client and optionally probe the service.

        An unreachable service at startup switches the capability to FallbackMode
        for the rest of the process lifetime.

        Args:
            healthcheck (bool): Probe the service after booting.
            transport: Optional custom httpx transport (tests).

        Returns:
            LLMCapability: The capability to inject into the gateway.
        """
        if self.client is None:
            return self.capability

        await self.client.boot(transport=transport)
        if not healthcheck:
            return self.capability

        try:
            result = await self.client.do_healthcheck()
            reachable = result.is_success
            detail = "status %d" % result.status_code
        except httpx.HTTPError as e:
            reachable = False
            detail = str(e) or e.__class__.__name__

        if not reachable:
            await self.client.close()
            self.client = None
            self.capability = self._fallback("LLM service is not reachable (%s)." % detail)
        else:
            self.logging.info("LLM service reachable (%s).", self.capability.client.get_engine_name())
        return self.capability

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()

    def get_capability(self) -> LLMCapability:
        """Return the current AI capability."""
        return self.capability
