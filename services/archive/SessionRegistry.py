from services.archive.SessionStateHolder import SessionStateHolder
from services.archive.gateway.ArchiveGateway import ArchiveGateway
from shared.corpus.ArchiveCorpus import ArchiveCorpus
from shared.helper.HelperConfig import HelperConfig


class SessionRegistry:
    """In-memory sessions keyed by session id. Sessions die with the process."""

    def __init__(self, helper_config: HelperConfig, corpus: ArchiveCorpus, gateway: ArchiveGateway) -> None:
        self.logging = helper_config.get_logger()
        self._helper_config = helper_config
        self._corpus = corpus
        self._gateway = gateway
        self._sessions: dict[str, SessionStateHolder] = {}

    def get_session(self, session_id: str) -> SessionStateHolder:
        """Return the session for session_id, creating an empty one on first use."""
        session = self._sessions.get(session_id)
        if session is None:
            session = SessionStateHolder(
                helper_config=self._helper_config,
                corpus=self._corpus,
                gateway=self._gateway,
                session_id=session_id,
            )
            self._sessions[session_id] = session
            self.logging.debug("Created session %s.", session_id)
        return session

    def end_session(self, session_id: str) -> bool:
        """Discard a session. Returns False if it did not exist."""
        ended = self._sessions.pop(session_id, None) is not None
        if ended:
            self.logging.debug("Ended session %s.", session_id)
        return ended

    def __len__(self) -> int:
        return len(self._sessions)
