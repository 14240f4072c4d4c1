from src.modules.gateway import actions

CHAT = [
    {"role": "system", "content": "Answer briefly."},
    {"role": "user", "content": "What is the capital of Peru?"},
]


def test_anthropic_completion_is_normalized(client, gateway) -> None:
    gateway.reply({
        "id": "msg_42",
        "model": "claude-3-5-haiku-20241022",
        "content": [{"type": "text", "text": "Lima."}],
        "stop_reason": "end_turn",
        "usage": {"input_tokens": 20, "output_tokens": 2},
    })

    response = client.post("/chat-completions", json={
        "provider": "anthropic",
        "model": "claude-3-5-haiku-20241022",
        "messages": CHAT,
        "temperature": 0.7,
    })

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "msg_42"
    assert data["object"] == "chat.completion"
    assert data["choices"][0]["message"]["content"] == "Lima."
    assert data["choices"][0]["finish_reason"] == "end_turn"
    assert data["usage"] == {"input_tokens": 20, "output_tokens": 2}

    request = gateway.last
    assert request.url.path == "/v1/passthrough/messages"
    assert request.headers["x-pica-action-id"] == actions.ANTHROPIC
    assert request.headers["anthropic-version"] == "2023-06-01"
    assert gateway.last_json() == {
        "model": "claude-3-5-haiku-20241022",
        "max_tokens": 1000,
        "messages": [CHAT[1]],
        "system": "Answer briefly.",
        "temperature": 0.7,
    }


def test_openai_completion_passes_through(client, gateway) -> None:
    upstream = {
        "id": "chatcmpl-9",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o-mini",
        "choices": [{
            "index": 0,
            "message": {"role": "assistant", "content": "Lima."},
            "finish_reason": "stop",
        }],
        "usage": {"prompt_tokens": 20, "completion_tokens": 2, "total_tokens": 22},
    }
    gateway.reply(upstream)

    response = client.post("/chat-completions", json={
        "provider": "openai",
        "model": "gpt-4o-mini",
        "messages": CHAT,
        "max_tokens": 1000,
        "stream": True,
    })

    assert response.status_code == 200
    assert response.json() == upstream
    assert gateway.last.url.path == "/v1/passthrough/chat/completions"
    assert gateway.last.headers["x-pica-connection-key"] == "openai-conn"
    assert gateway.last_json() == {
        "model": "gpt-4o-mini",
        "messages": CHAT,
        "max_tokens": 1000,
        "stream": True,
    }


def test_perplexity_uses_default_model_and_keeps_extra_options(client, gateway) -> None:
    gateway.reply({"choices": []})

    client.post("/chat-completions", json={
        "provider": "perplexity",
        "messages": CHAT,
        "search_recency_filter": "week",
    })

    body = gateway.last_json()
    assert body["model"] == "sonar"
    assert body["messages"] == CHAT
    assert body["search_recency_filter"] == "week"
    assert "temperature" not in body
    assert gateway.last.headers["x-pica-action-id"] == actions.PERPLEXITY_CHAT


def test_unsupported_provider_never_reaches_gateway(client, gateway) -> None:
    response = client.post("/chat-completions", json={
        "provider": "cohere",
        "messages": CHAT,
    })

    assert response.status_code == 500
    assert response.json() == {"error": "Unsupported provider: cohere"}
    assert response.headers["access-control-allow-origin"] == "*"
    assert gateway.requests == []


def test_upstream_failure_becomes_error_body(client, gateway) -> None:
    gateway.reply({"error": "invalid connection key"}, status_code=401)

    response = client.post("/chat-completions", json={
        "provider": "openai",
        "messages": CHAT,
    })

    assert response.status_code == 500
    assert response.json() == {"error": "API request failed: Unauthorized"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_malformed_request_is_reported_as_error(client, gateway) -> None:
    response = client.post("/chat-completions", json={
        "provider": "openai",
        "messages": [{"role": "narrator", "content": "Once upon a time"}],
    })

    assert response.status_code == 500
    assert response.json()["error"].startswith("Invalid request:")
    assert gateway.requests == []


def test_success_responses_carry_cors_headers(client, gateway) -> None:
    gateway.reply({"choices": []})

    response = client.post("/chat-completions", json={"provider": "openai", "messages": CHAT})

    assert response.headers["access-control-allow-origin"] == "*"
    assert "content-type" in response.headers["access-control-allow-headers"]


def test_anthropic_non_string_id_survives_normalization(client, gateway) -> None:
    gateway.reply({"id": 7, "content": [{"type": "text", "text": "x"}]})

    response = client.post("/chat-completions", json={"provider": "anthropic", "messages": CHAT})

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 7
    assert "usage" not in data
    assert data["choices"][0]["message"]["content"] == "x"
