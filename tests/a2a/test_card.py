"""Tests for the local agent card builder."""

from a2a_bridge.a2a.card import build_agent_card, callable_url
from a2a_bridge.config import AgentIdentity, BridgeConfig, ServerSettings, SkillSettings


class TestCallableUrl:
    def test_derived_from_server(self) -> None:
        assert callable_url(ServerSettings(host="10.0.0.5", port=9000)) == "http://10.0.0.5:9000/a2a"

    def test_wildcard_host_uses_loopback(self) -> None:
        assert callable_url(ServerSettings(host="0.0.0.0", port=18790)) == "http://127.0.0.1:18790/a2a"

    def test_public_url_wins(self) -> None:
        server = ServerSettings(public_url="https://bridge.example.com/a2a")
        assert callable_url(server) == "https://bridge.example.com/a2a"

    def test_rpc_path_gets_leading_slash(self) -> None:
        assert callable_url(ServerSettings(port=1, rpc_path="rpc")) == "http://127.0.0.1:1/rpc"


class TestBuildAgentCard:
    def test_public_card_has_no_security(self) -> None:
        wire = build_agent_card(BridgeConfig()).to_wire()
        assert wire["name"] == "Assistant"
        assert wire["capabilities"] == {"streaming": False}
        assert wire["skills"][0]["id"] == "general"
        assert "securitySchemes" not in wire
        assert "security" not in wire

    def test_secret_adds_bearer_scheme(self) -> None:
        wire = build_agent_card(BridgeConfig(secret="s3cret")).to_wire()
        assert wire["securitySchemes"] == {"bearer": {"type": "http", "scheme": "bearer"}}
        assert wire["security"] == [{"bearer": []}]

    def test_identity_from_config(self) -> None:
        config = BridgeConfig(
            agent=AgentIdentity(
                name="Krolik",
                description="Helper",
                version="2.0.0",
                skills=(SkillSettings(id="code", name="Coding", tags=("dev",)),),
            ),
            server=ServerSettings(port=18789),
        )
        card = build_agent_card(config)
        assert card.name == "Krolik"
        assert card.version == "2.0.0"
        assert card.url == "http://127.0.0.1:18789/a2a"
        assert [s.id for s in card.skills] == ["code"]
        assert card.skills[0].tags == ["dev"]

    def test_secret_never_leaks_into_card(self) -> None:
        card = build_agent_card(BridgeConfig(secret="s3cret"))
        assert "s3cret" not in card.model_dump_json()
