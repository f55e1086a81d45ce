# SPDX-License-Identifier: Apache-2.0
"""Unit tests for the Configuration API client."""

import pytest

from livechat_sdk.configuration import (
    AgentFields,
    AutoAccessConditions,
    BotOptions,
    ChatPresenceFilter,
    CompanyDetails,
    Condition,
    ConfigurationAPI,
    GroupConfig,
    GroupPriority,
    Match,
    PropertyAccess,
    PropertyConfig,
    WebhookDefinition,
    WebhookFilters,
)
from livechat_sdk.exceptions import ValidationError

ACTION_PREFIX = "/v3.6/configuration/action/"


@pytest.fixture
def api(server, token_getter):
    return ConfigurationAPI(token_getter, http_client=server.client())


def action(server) -> str:
    path = server.last_request.url.path
    assert path.startswith(ACTION_PREFIX)
    return path[len(ACTION_PREFIX):]


class TestWebhooks:
    """Test webhook management."""

    def test_register_webhook(self, server, api):
        """register_webhook sends the definition and returns the id."""
        server.queue(json_body={"id": "pqi8oasdjahuakndw9nsad9na"})
        webhook = WebhookDefinition(
            action="incoming_chat",
            secret_key="laudla991lamda0pnoaa0",
            url="https://example.com/webhooks",
            type="license",
            additional_data=["chat_properties"],
            filters=WebhookFilters(
                chat_presence=ChatPresenceFilter()
                .with_my_bots()
                .with_user_ids(["a@b.c"], inclusive=False)
            ),
        )
        webhook_id = api.register_webhook(webhook, owner_client_id="client-1")

        assert webhook_id == "pqi8oasdjahuakndw9nsad9na"
        assert action(server) == "register_webhook"
        assert server.last_json() == {
            "action": "incoming_chat",
            "secret_key": "laudla991lamda0pnoaa0",
            "url": "https://example.com/webhooks",
            "type": "license",
            "additional_data": ["chat_properties"],
            "filters": {
                "chat_presence": {
                    "user_ids": {"exclude_values": ["a@b.c"]},
                    "my_bots": True,
                }
            },
            "owner_client_id": "client-1",
        }

    def test_list_webhooks(self, server, api):
        server.queue(
            json_body=[
                {
                    "id": "wh1",
                    "action": "incoming_chat",
                    "secret_key": "s",
                    "url": "https://example.com",
                    "type": "license",
                    "owner_client_id": "client-1",
                }
            ]
        )
        webhooks = api.list_webhooks("client-1")
        assert server.last_json() == {"owner_client_id": "client-1"}
        assert webhooks[0].id == "wh1"

    def test_unregister_webhook(self, server, api):
        server.queue()
        api.unregister_webhook("wh1")
        assert server.last_json() == {"id": "wh1"}

    def test_list_webhook_names(self, server, api):
        server.queue(json_body=[{"action": "incoming_chat", "filters": ["chat_presence"]}])
        names = api.list_webhook_names("3.6")
        assert server.last_json() == {"version": "3.6"}
        assert names[0].action == "incoming_chat"

    @pytest.mark.parametrize(
        "name", ["enable_license_webhooks", "disable_license_webhooks"]
    )
    def test_toggle_license_webhooks(self, server, api, name):
        server.queue()
        getattr(api, name)()
        assert action(server) == name
        assert server.last_json() == {}

    def test_get_license_webhooks_state(self, server, api):
        server.queue(json_body={"license_webhooks_enabled": True})
        assert api.get_license_webhooks_state().enabled is True


class TestBots:
    """Test bot management."""

    def test_create_bot(self, server, api):
        server.queue(json_body={"id": "5c9871d5372c824cbf22d860a707a578"})
        bot_id = api.create_bot(
            "Bot",
            BotOptions(
                default_group_priority=GroupPriority.DO_NOT_ASSIGN,
                groups=[GroupConfig(id=0, priority=GroupPriority.FIRST)],
            ),
        )
        assert bot_id == "5c9871d5372c824cbf22d860a707a578"
        assert server.last_json() == {
            "name": "Bot",
            "default_group_priority": "supervisor",
            "groups": [{"id": 0, "priority": "first"}],
        }

    def test_create_bot_rejects_do_not_assign_group(self, server, api):
        """DoNotAssign is only allowed as the default group priority."""
        options = BotOptions(groups=[GroupConfig(id=0, priority=GroupPriority.DO_NOT_ASSIGN)])
        with pytest.raises(
            ValidationError,
            match="DoNotAssign priority is allowed only as default group priority",
        ):
            api.create_bot("Bot", options)
        assert server.requests == []

    def test_update_bot_rejects_do_not_assign_group(self, server, api):
        options = BotOptions(groups=[GroupConfig(id=1, priority="supervisor")])
        with pytest.raises(ValidationError):
            api.update_bot("bot-1", options=options)
        assert server.requests == []

    def test_update_bot(self, server, api):
        server.queue()
        api.update_bot("bot-1", name="Renamed", options=BotOptions(max_chats_count=5))
        assert server.last_json() == {"id": "bot-1", "name": "Renamed", "max_chats_count": 5}

    def test_list_bots(self, server, api):
        server.queue(json_body=[{"id": "bot-1", "name": "Bot"}])
        bots = api.list_bots(get_all=True, fields=["job_title"])
        assert server.last_json() == {"all": True, "fields": ["job_title"]}
        assert bots[0].name == "Bot"

    def test_list_bots_default(self, server, api):
        """all=false is sent explicitly."""
        server.queue(json_body=[])
        api.list_bots()
        assert server.last_json() == {"all": False}

    def test_get_and_delete_bot(self, server, api):
        server.queue(json_body={"id": "bot-1"})
        assert api.get_bot("bot-1").id == "bot-1"
        api.delete_bot("bot-1")
        assert action(server) == "delete_bot"
        assert server.last_json() == {"id": "bot-1"}


class TestAgents:
    """Test agent management."""

    def test_create_agent(self, server, api):
        server.queue(json_body={"id": "smith@example.com"})
        agent_id = api.create_agent(
            "smith@example.com",
            AgentFields(name="Agent Smith", groups=[GroupConfig(id=0, priority="normal")]),
        )
        assert agent_id == "smith@example.com"
        assert server.last_json() == {
            "id": "smith@example.com",
            "name": "Agent Smith",
            "groups": [{"id": 0, "priority": "normal"}],
        }

    def test_list_agents_with_groups(self, server, api):
        server.queue(json_body=[{"id": "a@b.c", "name": "A"}])
        agents = api.list_agents(group_ids=[1], fields=["max_chats_count"])
        assert server.last_json() == {
            "filters": {"group_ids": [1]},
            "fields": ["max_chats_count"],
        }
        assert agents[0].name == "A"

    def test_list_agents_without_groups(self, server, api):
        """Empty group lists send no filters."""
        server.queue(json_body=[])
        api.list_agents(group_ids=[])
        assert server.last_json() == {}

    def test_get_agent(self, server, api):
        server.queue(json_body={"id": "a@b.c", "suspended": False})
        agent = api.get_agent("a@b.c")
        assert agent.suspended is False

    def test_update_agent(self, server, api):
        server.queue()
        api.update_agent("a@b.c", AgentFields(job_title="Support"))
        assert server.last_json() == {"id": "a@b.c", "job_title": "Support"}

    @pytest.mark.parametrize(
        "name",
        ["delete_agent", "suspend_agent", "unsuspend_agent", "approve_agent"],
    )
    def test_agent_id_operations(self, server, api, name):
        server.queue()
        getattr(api, name)("a@b.c")
        assert action(server) == name
        assert server.last_json() == {"id": "a@b.c"}

    def test_request_agent_unsuspension(self, server, api):
        server.queue()
        api.request_agent_unsuspension()
        assert server.last_request.content == b"{}"

    def test_reactivate_email(self, server, api):
        server.queue()
        api.reactivate_email("a@b.c")
        assert server.last_json() == {"agent_id": "a@b.c"}


class TestGroups:
    """Test group management."""

    def test_create_group(self, server, api):
        server.queue(json_body={"id": 19})
        group_id = api.create_group(
            "Sales", {"a@b.c": GroupPriority.FIRST, "bot": "last"}, "en"
        )
        assert group_id == 19
        assert server.last_json() == {
            "name": "Sales",
            "agent_priorities": {"a@b.c": "first", "bot": "last"},
            "language_code": "en",
        }

    def test_update_group(self, server, api):
        server.queue()
        api.update_group(19, name="Support")
        assert server.last_json() == {"id": 19, "name": "Support"}

    def test_get_and_list_groups(self, server, api):
        server.queue(json_body={"id": 0, "name": "General", "agent_priorities": {"a": "normal"}})
        group = api.get_group(0, fields=["agent_priorities"])
        assert server.last_json() == {"id": 0, "fields": ["agent_priorities"]}
        assert group.agent_priorities["a"] is GroupPriority.NORMAL

        server.queue(json_body=[{"id": 0}, {"id": 1}])
        assert [g.id for g in api.list_groups()] == [0, 1]

    def test_delete_group(self, server, api):
        server.queue()
        api.delete_group(19)
        assert server.last_json() == {"id": 19}


class TestProperties:
    """Test property management."""

    def test_register_property(self, server, api):
        server.queue()
        api.register_property(
            PropertyConfig(
                name="score",
                type="int",
                access={"chat": PropertyAccess(agent=["read", "write"])},
                range={"from": 0, "to": 10},
            )
        )
        assert server.last_json() == {
            "name": "score",
            "type": "int",
            "access": {"chat": {"agent": ["read", "write"], "customer": []}},
            "range": {"from": 0, "to": 10},
        }

    def test_unregister_property(self, server, api):
        server.queue()
        api.unregister_property("score", owner_client_id="client-1")
        assert server.last_json() == {"owner_client_id": "client-1", "name": "score"}

    @pytest.mark.parametrize(
        "read, write, expected",
        [(True, False, ["read"]), (True, True, ["read", "write"]), (False, True, ["write"])],
    )
    def test_publish_property(self, server, api, read, write, expected):
        """Access types list only the granted kinds."""
        server.queue()
        api.publish_property("score", read=read, write=write)
        assert server.last_json() == {"name": "score", "access_type": expected}

    def test_list_properties(self, server, api):
        server.queue(
            json_body={
                "score": {
                    "name": "score",
                    "type": "int",
                    "access": {"chat": {"agent": ["read"]}},
                }
            }
        )
        props = api.list_properties()
        assert props["score"].access["chat"].agent == ["read"]

    def test_list_license_properties_is_post(self, server, api):
        """Configuration property listing uses a JSON body."""
        server.queue(json_body={"ns": {"p": 1}})
        assert api.list_license_properties(namespace="ns") == {"ns": {"p": 1}}
        assert server.last_request.method == "POST"
        assert server.last_json() == {"namespace": "ns"}

    def test_list_groups_properties(self, server, api):
        server.queue(json_body=[{"id": 1, "properties": {"ns": {"p": 1}}}])
        result = api.list_groups_properties([1], name_prefix="p")
        assert server.last_json() == {"group_ids": [1], "name_prefix": "p"}
        assert result[0].properties == {"ns": {"p": 1}}

    def test_license_and_group_property_updates(self, server, api):
        server.queue()
        api.update_license_properties({"ns": {"p": 1}})
        assert server.last_json() == {"properties": {"ns": {"p": 1}}}
        api.update_group_properties(1, {"ns": {"p": 2}})
        assert server.last_json() == {"id": 1, "properties": {"ns": {"p": 2}}}
        api.delete_license_properties({"ns": ["p"]})
        assert server.last_json() == {"properties": {"ns": ["p"]}}
        api.delete_group_properties(1, {"ns": ["p"]})
        assert action(server) == "delete_group_properties"
        assert server.last_json() == {"id": 1, "properties": {"ns": ["p"]}}


class TestAutoAccess:
    """Test auto access rules."""

    def test_add_auto_access(self, server, api):
        server.queue(json_body={"id": "1d0bd2a0d18e4c8e9cd7b3bb8e10da3e"})
        conditions = AutoAccessConditions(
            domain=Condition(values=[Match(value="example.com", exact_match=True)])
        )
        access_id = api.add_auto_access([1], conditions, description="Example")
        assert access_id == "1d0bd2a0d18e4c8e9cd7b3bb8e10da3e"
        assert server.last_json() == {
            "access": {"groups": [1]},
            "conditions": {
                "domain": {
                    "values": [{"value": "example.com", "exact_match": True}],
                    "exclude_values": [],
                }
            },
            "description": "Example",
        }

    def test_update_auto_access(self, server, api):
        server.queue()
        api.update_auto_access("aa1", next_id="aa2")
        assert server.last_json() == {"id": "aa1", "next_id": "aa2"}

    def test_list_and_delete_auto_access(self, server, api):
        server.queue(
            json_body=[
                {"id": "aa1", "access": {"groups": [0]}, "conditions": {"url": {}}}
            ]
        )
        rules = api.list_auto_accesses()
        assert rules[0].access.groups == [0]
        server.queue()
        api.delete_auto_access("aa1")
        assert server.last_json() == {"id": "aa1"}


class TestTagsAndLicense:
    """Test tags and license operations."""

    def test_create_tag(self, server, api):
        server.queue()
        api.create_tag("vip", [0, 1])
        assert server.last_json() == {"name": "vip", "group_ids": [0, 1]}

    def test_delete_tag(self, server, api):
        server.queue()
        api.delete_tag("vip")
        assert server.last_json() == {"name": "vip"}

    def test_list_tags(self, server, api):
        server.queue(json_body=[{"name": "vip", "group_ids": [0]}])
        tags = api.list_tags([0])
        assert server.last_json() == {"group_ids": [0]}
        assert tags[0].name == "vip"

    def test_update_tag(self, server, api):
        server.queue()
        api.update_tag("vip", [2])
        assert action(server) == "update_tag"

    def test_check_product_limits_for_plan(self, server, api):
        server.queue(json_body=[{"resource": "groups", "limit_balance": -1}])
        limits = api.check_product_limits_for_plan("starter")
        assert server.last_json() == {"plan": "starter"}
        assert limits[0].limit_balance == -1

    def test_list_channels(self, server, api):
        server.queue(json_body=[{"channel_type": "code", "channel_subtype": ""}])
        assert api.list_channels()[0].channel_type == "code"

    def test_update_company_details(self, server, api):
        server.queue()
        api.update_company_details(CompanyDetails(company="ACME", city="Wroclaw"), True)
        assert server.last_json() == {"company": "ACME", "city": "Wroclaw", "enrich": True}
