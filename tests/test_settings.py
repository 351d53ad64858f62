from netparse.settings import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("NETPARSE_LLM_PROVIDER", raising=False)

    s = Settings(_env_file=None)

    assert s.llm_provider == "ollama"
    assert s.ollama_base_url == "http://localhost:11434"
    assert s.request_timeout == 120.0


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("NETPARSE_LLM_PROVIDER", "openai")
    monkeypatch.setenv("NETPARSE_REQUEST_TIMEOUT", "15")

    s = Settings(_env_file=None)

    assert s.llm_provider == "openai"
    assert s.request_timeout == 15.0
