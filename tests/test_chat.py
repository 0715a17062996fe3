import json

from sadak_sathi.helpers.chat import GREETING, INIT_FAILED, REPLY_FAILED, ChatSession
from sadak_sathi.prompts.assistant import build_route_prompt, build_system_instruction

from .conftest import FakeLLM


def _session(records, llm=None):
    llm = llm or FakeLLM()
    return ChatSession(records, lambda: llm), llm


def test_starts_with_greeting(road_records):
    session, _ = _session(road_records)
    assert [(m.sender, m.text) for m in session.messages] == [("ai", GREETING)]
    assert session.ready


def test_no_data_leaves_assistant_uninitialised():
    calls = []
    session = ChatSession([], lambda: calls.append("built"))
    assert not session.ready
    assert calls == []
    assert session.send("Is Prithvi open?") is None
    assert len(session.messages) == 1


def test_client_construction_failure_is_reported(road_records):
    def boom():
        raise ValueError("Gemini API key must be provided.")

    session = ChatSession(road_records, boom)
    assert not session.ready
    assert session.messages[-1].text == INIT_FAILED
    assert session.send("hello") is None


def test_send_appends_user_and_reply(road_records):
    session, llm = _session(road_records, FakeLLM("Prithvi Highway is blocked."))
    reply = session.send("Is Prithvi open?")

    assert reply.sender == "ai"
    assert reply.text == "Prithvi Highway is blocked."
    assert [m.sender for m in session.messages] == ["ai", "user", "ai"]
    assert len({m.id for m in session.messages}) == 3

    sent = llm.calls[0]
    assert sent[0] == {"role": "system", "content": build_system_instruction(road_records)}
    # The greeting is not replayed; the conversation opens with the user turn
    assert sent[1:] == [{"role": "user", "content": "Is Prithvi open?"}]


def test_history_alternates_roles(road_records):
    session, llm = _session(road_records)
    session.send("first")
    session.send("second")
    roles = [m["role"] for m in llm.calls[-1]]
    assert roles == ["system", "user", "assistant", "user"]


def test_blank_input_is_ignored(road_records):
    session, llm = _session(road_records)
    assert session.send("   ") is None
    assert llm.calls == []


def test_api_error_becomes_apology(road_records):
    llm = FakeLLM("Prithvi Highway is blocked.", error=RuntimeError("quota"))
    session, _ = _session(road_records, llm)
    reply = session.send("first")
    assert reply.text == REPLY_FAILED
    assert session.messages[-2].text == "first"

    # The failed exchange stays on screen but is not replayed to the model
    llm.error = None
    session.send("second")
    assert llm.calls[-1][1:] == [{"role": "user", "content": "second"}]
    assert [m.text for m in session.messages[1:]] == [
        "first", REPLY_FAILED, "second", "Prithvi Highway is blocked.",
    ]


def test_plan_route_sends_route_prompt(road_records):
    session, llm = _session(road_records)
    session.plan_route(" Kathmandu ", "Pokhara")
    assert llm.calls[0][-1]["content"] == build_route_prompt("Kathmandu", "Pokhara")


def test_plan_route_needs_both_ends(road_records):
    session, llm = _session(road_records)
    assert session.plan_route("Kathmandu", " ") is None
    assert llm.calls == []


def test_clear_and_export(road_records):
    session, _ = _session(road_records)
    session.send("hello")
    exported = json.loads(session.export())
    assert [m["sender"] for m in exported["messages"]] == ["ai", "user", "ai"]

    session.clear()
    assert [m.text for m in session.messages] == [GREETING]


def test_system_instruction_embeds_data(road_records):
    text = build_system_instruction(road_records)
    assert text.startswith("You are 'Sadak Sathi AI'")
    assert "CURRENT ROAD & BRIDGE DATA:" in text
    assert json.dumps(road_records, indent=2) in text
