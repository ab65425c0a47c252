# tests/services/test_message_service.py
"""Tests for gated message sending and conversation listing."""

from __future__ import annotations

import pytest
from sqlalchemy import func, select

from morse_messenger.core.errors import (
    AccountNotFoundError,
    ChatNotAuthorizedError,
    EmptyMessageError,
    SelfMessageForbiddenError,
)
from morse_messenger.models import Message
from morse_messenger.services.chat_requests import (
    create_chat_request,
    respond_to_chat_request,
)
from morse_messenger.services.messages import list_messages, send_message
from tests.conftest import context_for


def _message_count(db_session) -> int:
    return db_session.scalar(select(func.count()).select_from(Message))


def _accept(db_session, requester, target) -> None:
    chat_request = create_chat_request(db_session, context_for(requester), target.id)
    respond_to_chat_request(db_session, context_for(target), chat_request.id, "accept")


def test_privileged_account_sends_sos_without_request(db_session, admin, bob) -> None:
    message = send_message(db_session, context_for(admin), bob.id, text="SOS")

    assert message.morse == "... --- ..."
    assert message.text == "SOS"
    assert message.sender_id == admin.id
    assert message.recipient_id == bob.id


def test_anyone_may_message_privileged_account(db_session, admin, bob) -> None:
    message = send_message(db_session, context_for(bob), admin.id, morse_body=".... ..")
    assert message.text == "HI"


def test_morse_body_is_stored_trimmed(db_session, admin, bob) -> None:
    message = send_message(db_session, context_for(admin), bob.id, morse_body="  .... ..  ")
    assert message.morse == ".... .."


def test_message_without_accepted_request_is_refused(db_session, alice, bob) -> None:
    with pytest.raises(ChatNotAuthorizedError):
        send_message(db_session, context_for(alice), bob.id, text="hello")

    assert _message_count(db_session) == 0


def test_pending_request_does_not_authorize(db_session, alice, bob) -> None:
    create_chat_request(db_session, context_for(alice), bob.id)

    with pytest.raises(ChatNotAuthorizedError):
        send_message(db_session, context_for(alice), bob.id, text="hello")


def test_accepted_request_authorizes_both_directions(db_session, alice, bob) -> None:
    _accept(db_session, alice, bob)

    send_message(db_session, context_for(alice), bob.id, text="hi bob")
    send_message(db_session, context_for(bob), alice.id, text="hi alice")

    assert _message_count(db_session) == 2


def test_self_message_is_refused_before_anything_else(db_session, alice) -> None:
    with pytest.raises(SelfMessageForbiddenError):
        send_message(db_session, context_for(alice), alice.id, morse_body="")


@pytest.mark.parametrize(("morse_body", "text"), [("", None), ("   ", None), (None, ""), (None, None)])
def test_empty_body_is_refused(db_session, admin, bob, morse_body, text) -> None:
    with pytest.raises(EmptyMessageError):
        send_message(db_session, context_for(admin), bob.id, morse_body=morse_body, text=text)


def test_unknown_recipient_is_refused(db_session, admin) -> None:
    with pytest.raises(AccountNotFoundError):
        send_message(db_session, context_for(admin), 999, text="anyone?")


def test_both_bodies_are_refused(db_session, admin, bob) -> None:
    with pytest.raises(ValueError):
        send_message(db_session, context_for(admin), bob.id, morse_body="...", text="S")


def test_unsupported_text_is_stored_with_placeholder(db_session, admin, bob) -> None:
    message = send_message(db_session, context_for(admin), bob.id, text="né")

    assert message.morse == "-. ?"
    assert message.text == "N#"


def test_conversation_is_ordered_and_scoped_to_pair(db_session, admin, alice, bob) -> None:
    _accept(db_session, alice, bob)
    first = send_message(db_session, context_for(alice), bob.id, text="one")
    second = send_message(db_session, context_for(bob), alice.id, text="two")
    third = send_message(db_session, context_for(alice), bob.id, text="three")
    send_message(db_session, context_for(admin), alice.id, text="elsewhere")

    conversation = list_messages(db_session, context_for(alice), bob.id)
    assert [message.id for message in conversation] == [first.id, second.id, third.id]
    assert [message.text for message in conversation] == ["ONE", "TWO", "THREE"]

    assert list_messages(db_session, context_for(bob), alice.id) == conversation


def test_conversation_with_unknown_account(db_session, alice) -> None:
    with pytest.raises(AccountNotFoundError):
        list_messages(db_session, context_for(alice), 999)


@pytest.mark.parametrize("morse_body", ["meet me at noon", "... --- ... x", "._."])
def test_plaintext_morse_body_is_refused(db_session, admin, bob, morse_body) -> None:
    with pytest.raises(ValueError):
        send_message(db_session, context_for(admin), bob.id, morse_body=morse_body)

    assert _message_count(db_session) == 0


def test_morse_body_may_carry_unknown_character_placeholder(db_session, admin, bob) -> None:
    message = send_message(db_session, context_for(admin), bob.id, morse_body="-. ? / ...")

    assert message.morse == "-. ? / ..."
    assert message.text == "N# S"
