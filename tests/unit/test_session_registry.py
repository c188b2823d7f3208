"""Tests for SessionRegistry."""

from services.archive.SessionRegistry import SessionRegistry
from services.archive.gateway.ArchiveGateway import ArchiveGateway
from shared.corpus.ArchiveCorpus import ArchiveCorpus
from shared.helper.HelperConfig import HelperConfig


def test_sessions_are_created_once_and_can_end(
    helper_config: HelperConfig, corpus: ArchiveCorpus, fallback_gateway: ArchiveGateway
) -> None:
    registry = SessionRegistry(helper_config=helper_config, corpus=corpus, gateway=fallback_gateway)
    alice = registry.get_session("alice")
    assert registry.get_session("alice") is alice
    assert registry.get_session("bob") is not alice
    assert len(registry) == 2

    alice.toggle_tag("isa")
    assert registry.end_session("alice") is True
    assert registry.end_session("alice") is False
    assert registry.get_session("alice").filters.tag is None
