from config.settings import ForkSettings, GovernanceSettings
from constants.governance_constants import CORE_VOTING_QUORUM, GSC_QUORUM


def test_governance_defaults(monkeypatch):
    monkeypatch.delenv("GSC_MEMBERS", raising=False)
    monkeypatch.delenv("CORE_VOTING_QUORUM", raising=False)
    monkeypatch.delenv("GSC_QUORUM", raising=False)

    governance = GovernanceSettings(_env_file=None)

    assert governance.core_voting_quorum == CORE_VOTING_QUORUM == 1_100_000 * 10 ** 18
    assert governance.gsc_quorum == GSC_QUORUM
    assert governance.gsc_members == []


def test_gsc_members_are_split(monkeypatch):
    monkeypatch.setenv("GSC_MEMBERS", "0x01, 0x02 ,,0x03")

    governance = GovernanceSettings(_env_file=None)

    assert governance.gsc_members == ["0x01", "0x02", "0x03"]


def test_mainnet_fork_url(monkeypatch):
    monkeypatch.setenv("ALCHEMY_MAINNET_API_KEY", "secret")
    monkeypatch.setenv("FORK_BLOCK_NUMBER", "19000000")

    fork = ForkSettings(_env_file=None)

    assert fork.mainnet_fork_url == "https://eth-mainnet.g.alchemy.com/v2/secret"
    assert fork.block_number == 19000000


def test_mainnet_fork_url_without_key(monkeypatch):
    monkeypatch.delenv("ALCHEMY_MAINNET_API_KEY", raising=False)

    assert ForkSettings(_env_file=None).mainnet_fork_url is None
