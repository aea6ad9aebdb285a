from pricing.config import Settings, load_settings


def test_defaults(monkeypatch):
    for name in ("PRECIFICACAO_CUSTO_FIXO", "PRECIFICACAO_ERRO_SEGUNDOS", "PRECIFICACAO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == Settings(custo_fixo=50.0, erro_segundos=4.0, log_level="WARNING")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PRECIFICACAO_CUSTO_FIXO", "120.5")
    monkeypatch.setenv("PRECIFICACAO_ERRO_SEGUNDOS", "2")
    monkeypatch.setenv("PRECIFICACAO_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.custo_fixo == 120.5
    assert s.erro_segundos == 2.0
    assert s.log_level == "DEBUG"


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("PRECIFICACAO_CUSTO_FIXO", "abc")
    monkeypatch.setenv("PRECIFICACAO_ERRO_SEGUNDOS", "-1")
    monkeypatch.setenv("PRECIFICACAO_LOG_LEVEL", "verbose")
    assert load_settings() == Settings()
