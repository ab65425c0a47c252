# tests/v1/test_messages.py
"""Tests for message endpoints."""

from __future__ import annotations

from fastapi import status


def _send(client, headers, recipient_id: int, **body):
    return client.post("/api/v1/messages/", json={"recipient_id": recipient_id, **body}, headers=headers)


def _open_chat(client, requester_headers, target_headers, target_id: int) -> None:
    request_id = client.post(
        "/api/v1/chat-requests/", json={"target_id": target_id}, headers=requester_headers
    ).json()["id"]
    response = client.post(
        f"/api/v1/chat-requests/{request_id}/respond",
        json={"decision": "accept"},
        headers=target_headers,
    )
    assert response.status_code == status.HTTP_200_OK


def test_privileged_account_sends_without_request(client, admin, bob, admin_headers) -> None:
    response = _send(client, admin_headers, bob.id, morse="... --- ...")

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["status"] == "message_sent"
    assert data["message"]["morse"] == "... --- ..."
    assert data["message"]["text"] == "SOS"


def test_message_to_privileged_account(client, admin, bob_headers) -> None:
    response = _send(client, bob_headers, admin.id, text="help")
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["message"]["morse"] == ".... . .-.. .--."


def test_message_without_accepted_chat(client, bob, alice_headers) -> None:
    response = _send(client, alice_headers, bob.id, text="hi")

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["code"] == "chat_not_authorized"


def test_messages_after_acceptance(client, alice, bob, alice_headers, bob_headers) -> None:
    _open_chat(client, alice_headers, bob_headers, bob.id)

    assert _send(client, alice_headers, bob.id, text="hi bob").status_code == status.HTTP_201_CREATED
    assert _send(client, bob_headers, alice.id, morse=".... ..").status_code == status.HTTP_201_CREATED

    response = client.get(f"/api/v1/messages/with/{bob.id}", headers=alice_headers)
    assert response.status_code == status.HTTP_200_OK
    conversation = response.json()
    assert [item["text"] for item in conversation] == ["HI BOB", "HI"]
    assert [item["sender_id"] for item in conversation] == [alice.id, bob.id]
    assert conversation[0]["morse"] == ".... .. / -... --- -..."


def test_empty_message(client, bob, admin_headers) -> None:
    response = _send(client, admin_headers, bob.id, morse="   ")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["code"] == "empty_message"


def test_message_to_self(client, alice, alice_headers) -> None:
    response = _send(client, alice_headers, alice.id, text="me")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["code"] == "self_message_forbidden"


def test_message_to_unknown_account(client, admin_headers) -> None:
    response = _send(client, admin_headers, 999, text="hello")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_message_body_must_be_exactly_one(client, bob, admin_headers) -> None:
    assert _send(client, admin_headers, bob.id).status_code == 422
    assert _send(client, admin_headers, bob.id, morse="...", text="s").status_code == 422


def test_conversation_with_unknown_account(client, alice_headers) -> None:
    response = client.get("/api/v1/messages/with/999", headers=alice_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_conversation_requires_authentication(client, bob) -> None:
    response = client.get(f"/api/v1/messages/with/{bob.id}")
    assert response.status_code in {status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN}


def test_plaintext_in_morse_field_is_rejected(client, bob, admin_headers) -> None:
    response = _send(client, admin_headers, bob.id, morse="meet me at noon")
    assert response.status_code == 422

    conversation = client.get(f"/api/v1/messages/with/{bob.id}", headers=admin_headers).json()
    assert conversation == []


def test_morse_field_accepts_placeholder(client, bob, admin_headers) -> None:
    response = _send(client, admin_headers, bob.id, morse="-. ?")
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["message"]["text"] == "N#"
