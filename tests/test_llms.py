import pytest

from sadak_sathi.llms import GeminiClient, get_client


class FakeModel:
    def __init__(self, name, system_instruction=None, error=None):
        self.name = name
        self.system_instruction = system_instruction
        self.error = error
        self.calls = []

    def generate_content(self, contents, generation_config=None):
        self.calls.append((contents, generation_config))
        if self.error:
            raise self.error
        return type("Response", (), {"text": "ok"})()


class FakeGenAI:
    def __init__(self, error=None):
        self.error = error
        self.models = []

    def GenerativeModel(self, name, system_instruction=None):  # noqa: N802
        model = FakeModel(name, system_instruction, self.error)
        self.models.append(model)
        return model


def _client(genai):
    client = GeminiClient.__new__(GeminiClient)
    client._genai = genai
    return client


def test_missing_key_is_rejected():
    with pytest.raises(ValueError):
        GeminiClient(None)
    with pytest.raises(ValueError):
        get_client("gemini", "")


def test_unknown_provider():
    with pytest.raises(ValueError, match="Unknown LLM provider"):
        get_client("groq", "key")


def test_convert_messages_splits_system_and_maps_roles():
    system, contents = GeminiClient._convert_messages([
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "hi"},
        {"role": "assistant", "content": "hello"},
    ])
    assert system == "be brief"
    assert contents == [
        {"role": "user", "parts": ["hi"]},
        {"role": "model", "parts": ["hello"]},
    ]


def test_chat_passes_system_instruction_and_generation_config():
    genai = FakeGenAI()
    reply = _client(genai).chat(
        [{"role": "system", "content": "data"}, {"role": "user", "content": "q"}],
        model="gemini-test",
        temperature=0.2,
        max_tokens=50,
    )
    assert reply == "ok"
    model = genai.models[0]
    assert (model.name, model.system_instruction) == ("gemini-test", "data")
    assert model.calls[0][1] == {"temperature": 0.2, "max_output_tokens": 50}


def test_chat_wraps_api_errors():
    genai = FakeGenAI(error=Exception("429 quota"))
    with pytest.raises(RuntimeError, match="Gemini API error: 429 quota"):
        _client(genai).chat([{"role": "user", "content": "q"}])
