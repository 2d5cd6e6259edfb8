import pytest

from chainquest.config import EnvConfig, NetConfig, net_config_from_env


def test_defaults_when_unset():
    cfg = EnvConfig.from_env({})
    assert cfg.host == "127.0.0.1"
    assert cfg.port == 8080


def test_values_from_environment():
    cfg = EnvConfig.from_env({"CQ_HOST": "game.example.com", "CQ_PORT": "9000"})
    assert cfg.host == "game.example.com"
    assert cfg.port == 9000


@pytest.mark.parametrize("raw", ["abc", "70000", "-1", " 80", "", "8.5"])
def test_invalid_port_falls_back(raw):
    assert EnvConfig.from_env({"CQ_PORT": raw}).port == 8080


def test_port_upper_bound_accepted():
    assert EnvConfig.from_env({"CQ_PORT": "65535"}).port == 65535


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("CQ_HOST", "10.0.0.5")
    monkeypatch.setenv("CQ_PORT", "7000")
    cfg = EnvConfig.from_env()
    assert (cfg.host, cfg.port) == ("10.0.0.5", 7000)


def test_net_config_from_env_matches_env_config():
    environ = {"CQ_HOST": "localhost", "CQ_PORT": "4242"}
    env_cfg = EnvConfig.from_env(environ)
    assert net_config_from_env(environ) == NetConfig(host=env_cfg.host, port=env_cfg.port)