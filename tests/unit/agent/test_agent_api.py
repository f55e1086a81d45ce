# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for the Agent Chat API client.

Each test checks the action called, the request body sent and the decoded
result, against a stub transport.
"""

from datetime import datetime, timezone

import pytest

from livechat_sdk.agent import AgentAPI
from livechat_sdk.agent.filters import ArchivesFilters, ChatsFilters
from livechat_sdk.agent.models import MulticastRecipients, TransferChatOptions
from livechat_sdk.exceptions import APIError, ValidationError
from livechat_sdk.models import (
    Chat,
    FilledForm,
    InitialChat,
    InitialThread,
    Message,
)

ACTION_URL = "https://api.livechatinc.com/v3.6/agent/action/"


@pytest.fixture
def api(server, token_getter):
    return AgentAPI(token_getter, client_id="client", http_client=server.client())


def action(server) -> str:
    url = str(server.last_request.url)
    assert url.startswith(ACTION_URL)
    return url[len(ACTION_URL):]


class TestChats:
    """Test chat operations."""

    def test_list_chats(self, server, api):
        """list_chats sends filters and pagination and decodes summaries."""
        server.queue(
            json_body={
                "chats_summary": [{"id": "PJ0MRSHTDG", "active": True}],
                "found_chats": 1,
                "next_page_id": "MTUxNzM5ODEzMTQ5Nw==",
            }
        )
        page = api.list_chats(
            filters=ChatsFilters().without_active_chats(), sort_order="asc", limit=10
        )

        assert action(server) == "list_chats"
        assert server.last_json() == {
            "filters": {"include_active": False},
            "sort_order": "asc",
            "limit": 10,
        }
        assert page.found_chats == 1
        assert page.chats_summary[0].id == "PJ0MRSHTDG"
        assert page.next_page_id == "MTUxNzM5ODEzMTQ5Nw=="

    def test_get_chat(self, server, api):
        """get_chat decodes a Chat with split users."""
        server.queue(
            json_body={
                "id": "PJ0MRSHTDG",
                "users": [{"id": "a", "type": "agent"}],
                "thread": {"id": "K600PKZON8", "events": []},
            }
        )
        chat = api.get_chat("PJ0MRSHTDG")

        assert server.last_json() == {"chat_id": "PJ0MRSHTDG"}
        assert isinstance(chat, Chat)
        assert "a" in chat.agents

    def test_list_threads(self, server, api):
        """list_threads decodes threads."""
        server.queue(json_body={"threads": [{"id": "K600PKZON8"}], "found_threads": 1})
        page = api.list_threads("PJ0MRSHTDG", min_events_count=2)

        assert server.last_json() == {"chat_id": "PJ0MRSHTDG", "min_events_count": 2}
        assert page.threads[0].id == "K600PKZON8"

    def test_list_archives(self, server, api):
        """list_archives decodes full chats."""
        server.queue(json_body={"chats": [{"id": "PJ0MRSHTDG"}], "found_chats": 1})
        page = api.list_archives(filters=ArchivesFilters().by_query("refund"), limit=5)

        assert server.last_json() == {"filters": {"query": "refund"}, "limit": 5}
        assert page.chats[0].id == "PJ0MRSHTDG"

    def test_start_chat(self, server, api):
        """start_chat sends the initial chat with its events."""
        server.queue(
            json_body={
                "chat_id": "PJ0MRSHTDG",
                "thread_id": "K600PKZON8",
                "event_ids": ["K600PKZON8_1"],
            }
        )
        initial = InitialChat(thread=InitialThread(events=[Message(text="Hello")]))
        result = api.start_chat(initial, continuous=True)

        assert server.last_json() == {
            "chat": {"thread": {"events": [{"type": "message", "text": "Hello"}]}},
            "continuous": True,
            "active": True,
        }
        assert result.chat_id == "PJ0MRSHTDG"
        assert result.event_ids == ["K600PKZON8_1"]

    def test_start_chat_inactive(self, server, api):
        """An inactive start sends active=false and no chat."""
        server.queue(json_body={"chat_id": "PJ0MRSHTDG"})
        api.start_chat(active=False)
        assert server.last_json() == {"active": False}

    def test_start_chat_rejects_unsendable_event(self, server, api):
        """Unsendable initial events fail before any request."""
        initial = InitialChat(thread=InitialThread(events=[FilledForm(fields=[])]))
        with pytest.raises(ValidationError):
            api.start_chat(initial)
        assert server.requests == []

    def test_resume_chat(self, server, api):
        """resume_chat targets the given chat id."""
        server.queue(json_body={"thread_id": "K600PKZON8"})
        result = api.resume_chat(InitialChat(id="PJ0MRSHTDG"))

        assert action(server) == "resume_chat"
        assert server.last_json() == {"chat": {"id": "PJ0MRSHTDG"}, "active": True}
        assert result.thread_id == "K600PKZON8"

    def test_deactivate_chat(self, server, api):
        """deactivate_chat sends the chat id and presence flag."""
        server.queue()
        api.deactivate_chat("PJ0MRSHTDG", ignore_requester_presence=True)
        assert server.last_json() == {
            "id": "PJ0MRSHTDG",
            "ignore_requester_presence": True,
        }

    @pytest.mark.parametrize("name", ["follow_chat", "unfollow_chat"])
    def test_follow_unfollow(self, server, api, name):
        """Follow operations send the chat id."""
        server.queue()
        getattr(api, name)("PJ0MRSHTDG")
        assert action(server) == name
        assert server.last_json() == {"id": "PJ0MRSHTDG"}

    def test_transfer_chat(self, server, api):
        """transfer_chat sends the target and flattened options."""
        server.queue()
        api.transfer_chat(
            "PJ0MRSHTDG",
            "group",
            [1],
            TransferChatOptions(ignore_agents_availability=True),
        )
        assert server.last_json() == {
            "id": "PJ0MRSHTDG",
            "target": {"type": "group", "ids": [1]},
            "ignore_agents_availability": True,
        }

    def test_transfer_chat_without_target(self, server, api):
        """The target is omitted when nothing is given."""
        server.queue()
        api.transfer_chat("PJ0MRSHTDG")
        assert server.last_json() == {"id": "PJ0MRSHTDG"}

    def test_add_and_remove_user(self, server, api):
        """User membership operations send the user identity."""
        server.queue()
        api.add_user_to_chat("PJ0MRSHTDG", "a@b.c", "agent", "all")
        assert server.last_json() == {
            "chat_id": "PJ0MRSHTDG",
            "user_id": "a@b.c",
            "user_type": "agent",
            "visibility": "all",
        }
        api.remove_user_from_chat("PJ0MRSHTDG", "a@b.c", "agent", True)
        assert action(server) == "remove_user_from_chat"
        assert server.last_json()["ignore_requester_presence"] is True


class TestEvents:
    """Test event operations."""

    def test_send_event(self, server, api):
        """send_event returns the new event id."""
        server.queue(json_body={"event_id": "K600PKZON8_1"})
        event_id = api.send_event("PJ0MRSHTDG", Message(text="Hello", recipients="all"))

        assert event_id == "K600PKZON8_1"
        assert server.last_json() == {
            "chat_id": "PJ0MRSHTDG",
            "event": {"type": "message", "text": "Hello", "recipients": "all"},
        }

    def test_send_event_attach_to_last_thread(self, server, api):
        """attach_to_last_thread is sent when requested."""
        server.queue(json_body={"event_id": "x"})
        api.send_event("PJ0MRSHTDG", Message(text="Hi"), attach_to_last_thread=True)
        assert server.last_json()["attach_to_last_thread"] is True

    def test_send_event_rejects_filled_form(self, server, api):
        """Filled forms cannot be sent."""
        with pytest.raises(ValidationError):
            api.send_event("PJ0MRSHTDG", FilledForm(fields=[]))
        assert server.requests == []

    def test_send_rich_message_postback(self, server, api):
        """Postbacks are nested under 'postback'."""
        server.queue()
        api.send_rich_message_postback("PJ0MRSHTDG", "ev", "th", "yes", True)
        assert server.last_json() == {
            "chat_id": "PJ0MRSHTDG",
            "event_id": "ev",
            "thread_id": "th",
            "postback": {"id": "yes", "toggled": True},
        }

    def test_mark_events_as_seen_naive_is_utc(self, server, api):
        """Naive datetimes are sent as UTC."""
        server.queue()
        api.mark_events_as_seen("PJ0MRSHTDG", datetime(2026, 1, 2, 3, 4, 5))
        assert server.last_json() == {
            "chat_id": "PJ0MRSHTDG",
            "seen_up_to": "2026-01-02T03:04:05+00:00",
        }

    def test_send_typing_indicator(self, server, api):
        """Typing indicators carry visibility when given."""
        server.queue()
        api.send_typing_indicator("PJ0MRSHTDG", True, visibility="agents")
        assert server.last_json() == {
            "chat_id": "PJ0MRSHTDG",
            "visibility": "agents",
            "is_typing": True,
        }

    def test_multicast(self, server, api):
        """Multicast sends recipients and arbitrary content."""
        server.queue()
        api.multicast(
            MulticastRecipients.model_validate({"agents": {"all": True}}),
            {"example": "content"},
            "type1",
        )
        assert server.last_json() == {
            "recipients": {"agents": {"all": True}},
            "content": {"example": "content"},
            "type": "type1",
        }

    def test_upload_file(self, server, api):
        """upload_file returns the temporary URL."""
        server.queue(json_body={"url": "https://cdn.livechat-files.com/api/file/x"})
        assert api.upload_file("x.txt", b"data") == (
            "https://cdn.livechat-files.com/api/file/x"
        )
        assert action(server) == "upload_file"


class TestPropertiesAndTags:
    """Test property and tag operations."""

    def test_update_chat_properties(self, server, api):
        server.queue()
        api.update_chat_properties("PJ0MRSHTDG", {"ns": {"prop": 1}})
        assert server.last_json() == {
            "id": "PJ0MRSHTDG",
            "properties": {"ns": {"prop": 1}},
        }

    def test_delete_event_properties(self, server, api):
        server.queue()
        api.delete_event_properties("c", "t", "e", {"ns": ["prop"]})
        assert action(server) == "delete_event_properties"
        assert server.last_json() == {
            "chat_id": "c",
            "thread_id": "t",
            "event_id": "e",
            "properties": {"ns": ["prop"]},
        }

    def test_update_thread_properties(self, server, api):
        server.queue()
        api.update_thread_properties("c", "t", {"ns": {"prop": "v"}})
        assert server.last_json()["thread_id"] == "t"

    @pytest.mark.parametrize("name", ["tag_thread", "untag_thread"])
    def test_tagging(self, server, api, name):
        """Tag operations send chat, thread and tag."""
        server.queue()
        getattr(api, name)("c", "t", "vip")
        assert action(server) == name
        assert server.last_json() == {"chat_id": "c", "thread_id": "t", "tag": "vip"}


class TestCustomers:
    """Test customer operations."""

    def test_get_customer(self, server, api):
        server.queue(json_body={"id": "b7eff798", "type": "customer", "name": "Jane"})
        customer = api.get_customer("b7eff798")
        assert server.last_json() == {"id": "b7eff798"}
        assert customer.name == "Jane"

    def test_create_customer(self, server, api):
        """create_customer returns the new id."""
        server.queue(json_body={"customer_id": "b7eff798"})
        assert api.create_customer(name="Jane", email="j@d.e") == "b7eff798"
        assert server.last_json() == {"name": "Jane", "email": "j@d.e"}

    def test_update_customer(self, server, api):
        server.queue()
        api.update_customer("b7eff798", session_fields=[{"a": "b"}])
        assert server.last_json() == {"id": "b7eff798", "session_fields": [{"a": "b"}]}

    def test_ban_customer(self, server, api):
        server.queue()
        api.ban_customer("b7eff798", 3)
        assert server.last_json() == {"id": "b7eff798", "ban": {"days": 3}}

    @pytest.mark.parametrize("name", ["follow_customer", "unfollow_customer"])
    def test_follow_customer(self, server, api, name):
        server.queue()
        getattr(api, name)("b7eff798")
        assert action(server) == name


class TestRouting:
    """Test routing operations."""

    def test_set_routing_status(self, server, api):
        server.queue()
        api.set_routing_status("not_accepting_chats", agent_id="a@b.c")
        assert server.last_json() == {
            "agent_id": "a@b.c",
            "status": "not_accepting_chats",
        }

    def test_list_agents_for_transfer(self, server, api):
        server.queue(json_body=[{"agent_id": "a@b.c", "total_active_chats": 2}])
        agents = api.list_agents_for_transfer("PJ0MRSHTDG")
        assert agents[0].agent_id == "a@b.c"
        assert agents[0].total_active_chats == 2

    def test_list_routing_statuses(self, server, api):
        server.queue(json_body=[{"agent_id": "a@b.c", "status": "accepting_chats"}])
        statuses = api.list_routing_statuses([1])
        assert server.last_json() == {"filters": {"group_ids": [1]}}
        assert statuses[0].status == "accepting_chats"

    def test_list_routing_statuses_without_groups(self, server, api):
        server.queue(json_body=[])
        assert api.list_routing_statuses() == []
        assert server.last_json() == {"filters": {}}


class TestClient:
    """Test client-level behavior."""

    def test_user_agent_and_author(self, server, api):
        """The client id and author id are sent as headers."""
        server.queue()
        api.set_author_id("bot-1")
        api.follow_chat("PJ0MRSHTDG")
        headers = server.last_request.headers
        assert headers["User-Agent"] == "Python SDK Application client"
        assert headers["X-Author-Id"] == "bot-1"

    def test_api_error_propagates(self, server, api):
        """API errors surface from typed operations."""
        server.queue(
            404, json_body={"error": {"type": "not_found", "message": "Chat not found"}}
        )
        with pytest.raises(APIError) as exc_info:
            api.get_chat("missing")
        assert exc_info.value.is_type("not_found")

    def test_mark_events_as_seen_aware_datetime(self, server, api):
        """Aware datetimes are sent unchanged."""
        server.queue()
        api.mark_events_as_seen(
            "c", datetime(2026, 1, 2, tzinfo=timezone.utc)
        )
        assert server.last_json()["seen_up_to"] == "2026-01-02T00:00:00+00:00"
