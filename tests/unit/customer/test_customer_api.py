# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for the Customer Chat API client.

Customer requests carry the organization id of the token in the query
string; the stub transport checks it along with the request body.
"""

from datetime import datetime

import pytest

from livechat_sdk.customer import CustomerAPI, FormType, Recipients
from livechat_sdk.exceptions import ValidationError
from livechat_sdk.models import FilledForm, InitialChat, Message, SystemMessage

BASE_URL = "https://api.livechatinc.com/v3.6/customer/action/"


@pytest.fixture
def api(server, token_getter):
    return CustomerAPI(token_getter, client_id="client", http_client=server.client())


def action(server) -> str:
    url = server.last_request.url
    assert url.path.startswith("/v3.6/customer/action/")
    assert url.params["organization_id"] == "xD"
    return url.path.rsplit("/", 1)[-1]


class TestRequests:
    """Test request construction common to all customer calls."""

    def test_url_carries_organization_id(self, server, api):
        """The organization id is appended to the action URL."""
        server.queue(json_body={"chat_id": "PJ0MRSHTDG"})
        api.start_chat()
        assert str(server.last_request.url) == (
            f"{BASE_URL}start_chat?organization_id=xD"
        )

    def test_headers(self, server, api):
        """Authorization, region and user agent are sent."""
        server.queue(json_body={"chat_id": "PJ0MRSHTDG"})
        api.start_chat()
        headers = server.last_request.headers
        assert headers["Authorization"] == "Bearer access_token"
        assert headers["X-Region"] == "region"
        assert headers["User-Agent"] == "Python SDK Application client"


class TestChats:
    """Test chat operations."""

    def test_start_chat(self, server, api):
        server.queue(json_body={"chat_id": "PJ0MRSHTDG", "thread_id": "K600PKZON8"})
        result = api.start_chat(continuous=True)

        assert action(server) == "start_chat"
        assert server.last_json() == {"continuous": True, "active": True}
        assert result.thread_id == "K600PKZON8"

    def test_start_chat_rejects_filled_form(self, server, api):
        """Filled forms are not allowed as initial events."""
        chat = InitialChat.model_validate({"thread": {"events": []}})
        chat.thread.events = [FilledForm(fields=[])]
        with pytest.raises(ValidationError):
            api.start_chat(chat)
        assert server.requests == []

    def test_resume_chat(self, server, api):
        server.queue(json_body={"thread_id": "K600PKZON8", "event_ids": []})
        api.resume_chat(InitialChat(id="PJ0MRSHTDG"), active=False)
        assert server.last_json() == {"chat": {"id": "PJ0MRSHTDG"}, "active": False}

    def test_list_chats(self, server, api):
        """list_chats decodes summaries and the total."""
        server.queue(
            json_body={
                "chats_summary": [{"id": "PJ0MRSHTDG", "users": []}],
                "total_chats": 1,
            }
        )
        page = api.list_chats(limit=5)
        assert server.last_json() == {"limit": 5}
        assert page.total_chats == 1
        assert page.chats_summary[0].id == "PJ0MRSHTDG"

    def test_get_chat(self, server, api):
        server.queue(json_body={"id": "PJ0MRSHTDG"})
        api.get_chat("PJ0MRSHTDG", "K600PKZON8")
        assert server.last_json() == {"chat_id": "PJ0MRSHTDG", "thread_id": "K600PKZON8"}

    def test_list_threads(self, server, api):
        server.queue(json_body={"threads": [], "found_threads": 0})
        api.list_threads("PJ0MRSHTDG", sort_order="desc", min_events_count=1)
        assert server.last_json() == {
            "chat_id": "PJ0MRSHTDG",
            "sort_order": "desc",
            "min_events_count": 1,
        }

    def test_deactivate_chat(self, server, api):
        server.queue()
        api.deactivate_chat("PJ0MRSHTDG")
        assert action(server) == "deactivate_chat"
        assert server.last_json() == {"id": "PJ0MRSHTDG"}


class TestEvents:
    """Test event operations."""

    def test_send_event(self, server, api):
        server.queue(json_body={"event_id": "K600PKZON8_1"})
        event_id = api.send_event("PJ0MRSHTDG", Message(text="Hi"), True)
        assert event_id == "K600PKZON8_1"
        assert server.last_json() == {
            "chat_id": "PJ0MRSHTDG",
            "event": {"type": "message", "text": "Hi"},
            "attach_to_last_thread": True,
        }

    def test_send_message(self, server, api):
        """send_message wraps the text in a message event."""
        server.queue(json_body={"event_id": "e"})
        api.send_message("PJ0MRSHTDG", "Hello", Recipients.AGENTS)
        assert server.last_json()["event"] == {
            "type": "message",
            "text": "Hello",
            "recipients": "agents",
        }

    def test_send_system_message(self, server, api):
        """send_system_message builds a system message event."""
        server.queue(json_body={"event_id": "e"})
        api.send_system_message(
            "PJ0MRSHTDG", "Hi {name}", "greeting", text_vars={"name": "Jane"}
        )
        assert server.last_json()["event"] == {
            "type": "system_message",
            "text": "Hi {name}",
            "system_message_type": "greeting",
            "text_vars": {"name": "Jane"},
            "recipients": "all",
        }

    def test_invalid_recipients(self, server, api):
        """Unknown recipients are rejected before sending."""
        with pytest.raises(ValueError):
            api.send_message("PJ0MRSHTDG", "Hello", "everyone")
        assert server.requests == []

    def test_send_event_rejects_filled_form(self, server, api):
        with pytest.raises(ValidationError):
            api.send_event("PJ0MRSHTDG", FilledForm(fields=[]))

    def test_send_event_accepts_system_message(self, server, api):
        server.queue(json_body={"event_id": "e"})
        assert api.send_event("c", SystemMessage(system_message_type="x")) == "e"

    def test_send_rich_message_postback(self, server, api):
        server.queue()
        api.send_rich_message_postback("c", "t", "e", "yes", False)
        assert server.last_json() == {
            "chat_id": "c",
            "thread_id": "t",
            "event_id": "e",
            "postback": {"id": "yes", "toggled": False},
        }

    def test_send_sneak_peek(self, server, api):
        server.queue()
        api.send_sneak_peek("c", "I'm typ")
        assert server.last_json() == {"chat_id": "c", "sneak_peek_text": "I'm typ"}

    def test_mark_events_as_seen(self, server, api):
        server.queue()
        api.mark_events_as_seen("c", datetime(2026, 5, 1, 12, 0))
        assert server.last_json()["seen_up_to"] == "2026-05-01T12:00:00+00:00"

    def test_upload_file(self, server, api):
        """Uploads go to the customer namespace with the organization id."""
        server.queue(json_body={"url": "https://cdn/x"})
        assert api.upload_file("x.txt", b"x") == "https://cdn/x"
        assert action(server) == "upload_file"


class TestProperties:
    """Test property operations."""

    def test_update_chat_properties(self, server, api):
        server.queue()
        api.update_chat_properties("c", {"ns": {"p": True}})
        assert server.last_json() == {"id": "c", "properties": {"ns": {"p": True}}}

    def test_delete_thread_properties(self, server, api):
        server.queue()
        api.delete_thread_properties("c", "t", {"ns": ["p"]})
        assert server.last_json() == {
            "chat_id": "c",
            "thread_id": "t",
            "properties": {"ns": ["p"]},
        }

    def test_update_event_properties(self, server, api):
        server.queue()
        api.update_event_properties("c", "t", "e", {"ns": {"p": 1}})
        assert server.last_json()["event_id"] == "e"

    def test_list_license_properties_uses_get(self, server, api):
        """License properties are fetched with a query string."""
        server.queue(json_body={"ns": {"p": "v"}})
        result = api.list_license_properties(namespace="ns")

        request = server.last_request
        assert request.method == "GET"
        assert request.url.params["namespace"] == "ns"
        assert "name" not in request.url.params
        assert result == {"ns": {"p": "v"}}

    def test_list_group_properties(self, server, api):
        server.queue(json_body={})
        api.list_group_properties(2, name="p")
        params = server.last_request.url.params
        assert params["id"] == "2"
        assert params["name"] == "p"
        assert params["organization_id"] == "xD"


class TestCustomer:
    """Test customer operations."""

    def test_get_customer(self, server, api):
        """get_customer sends an empty object and decodes a sparse customer."""
        server.queue(
            json_body={
                "id": "b7eff798",
                "type": "customer",
                "email": "jane@example.com",
                "email_verified": True,
                "session_fields": [{"key": "value"}],
            }
        )
        customer = api.get_customer()
        assert server.last_request.content == b"{}"
        assert customer.email_verified is True
        assert customer.session_fields == [{"key": "value"}]

    def test_update_customer(self, server, api):
        server.queue()
        api.update_customer(name="Jane")
        assert server.last_json() == {"name": "Jane"}

    def test_set_customer_session_fields(self, server, api):
        server.queue()
        api.set_customer_session_fields([{"a": "b"}])
        assert server.last_json() == {"session_fields": [{"a": "b"}]}

    def test_request_email_verification(self, server, api):
        server.queue()
        api.request_email_verification("https://example.com/verified")
        assert server.last_json() == {"callback_uri": "https://example.com/verified"}

    def test_list_group_statuses_all(self, server, api):
        """Without group ids every group is requested."""
        server.queue(json_body={"groups_status": {"0": "online", "1": "offline"}})
        statuses = api.list_group_statuses()
        assert server.last_json() == {"all": True}
        assert statuses == {0: "online", 1: "offline"}

    def test_list_group_statuses_selected(self, server, api):
        server.queue(json_body={"groups_status": {"1": "online_for_queue"}})
        api.list_group_statuses([1])
        assert server.last_json() == {"group_ids": [1]}

    def test_check_goals(self, server, api):
        server.queue()
        api.check_goals("https://example.com", 0, {"plan": "pro"})
        assert server.last_json() == {
            "page_url": "https://example.com",
            "group_id": 0,
            "session_fields": {"plan": "pro"},
        }

    def test_get_form(self, server, api):
        """get_form decodes the form schema."""
        server.queue(
            json_body={
                "form": {
                    "id": "156630109416307809",
                    "fields": [
                        {"id": "1", "type": "name", "label": "Name:", "required": False}
                    ],
                },
                "enabled": True,
            }
        )
        result = api.get_form(0, FormType.PRECHAT)
        assert server.last_json() == {"group_id": 0, "type": "prechat"}
        assert result.enabled is True
        assert result.form.fields[0].label == "Name:"

    def test_get_form_rejects_unknown_type(self, server, api):
        with pytest.raises(ValueError):
            api.get_form(0, "survey")

    def test_get_predicted_agent(self, server, api):
        server.queue(
            json_body={"agent": {"id": "a@b.c", "name": "Agent", "is_bot": False}, "queue": False}
        )
        predicted = api.get_predicted_agent()
        assert server.last_json() == {}
        assert predicted.agent.id == "a@b.c"

    def test_get_url_info(self, server, api):
        server.queue(json_body={"title": "LiveChat", "url": "https://livechat.com"})
        info = api.get_url_info("https://livechat.com")
        assert info.title == "LiveChat"

    def test_greetings(self, server, api):
        server.queue()
        api.accept_greeting(7, "Q10X0W041P")
        assert server.last_json() == {"greeting_id": 7, "unique_id": "Q10X0W041P"}
        api.cancel_greeting("Q10X0W041P")
        assert action(server) == "cancel_greeting"
        assert server.last_json() == {"unique_id": "Q10X0W041P"}


class TestWidgetConfiguration:
    """Test widget configuration operations."""

    def test_get_dynamic_configuration(self, server, api):
        server.queue(json_body={"group_id": 0, "config_version": "84.0.0.3"})
        result = api.get_dynamic_configuration(url="https://example.com", test=True)

        params = server.last_request.url.params
        assert server.last_request.method == "GET"
        assert params["url"] == "https://example.com"
        assert params["test"] == "true"
        assert result.config_version == "84.0.0.3"

    def test_dynamic_configuration_omits_false_test(self, server, api):
        server.queue(json_body={})
        api.get_dynamic_configuration(group_id=1)
        params = server.last_request.url.params
        assert params["group_id"] == "1"
        assert "test" not in params

    def test_get_configuration(self, server, api):
        server.queue(
            json_body={
                "buttons": [{"id": "0466ba53cb", "type": "text"}],
                "properties": {"license": {"ns": {"p": 1}}},
            }
        )
        config = api.get_configuration(group_id=0, version="84.0.0.3")
        assert server.last_request.url.params["version"] == "84.0.0.3"
        assert config.buttons[0].id == "0466ba53cb"
        assert config.properties.license == {"ns": {"p": 1}}

    def test_get_localization(self, server, api):
        server.queue(json_body={"Agents_currently_not_available": "Our agents are away"})
        result = api.get_localization(group_id=0, language="en", version="1")
        assert result["Agents_currently_not_available"] == "Our agents are away"
        assert server.last_request.url.params["language"] == "en"
