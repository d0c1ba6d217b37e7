from __future__ import annotations

import pytest

from twitter_rest.exceptions import InvalidArgumentError
from twitter_rest.models import AccountSettings, Cursor, Limits, User
from twitter_rest.services import (
    AccountService,
    DirectMessageService,
    FollowersService,
    FriendsService,
    HelpService,
    ListService,
    SearchService,
    UserService,
)
from twitter_rest.services.options import ProfileOptions

from .test_tweet_service import FakeApiClient


def test_direct_messages_endpoints() -> None:
    client = FakeApiClient({"id": 3, "text": "hey"})
    service = DirectMessageService(client)

    message = service.send("alice", "hey")
    service.get(3)
    service.destroy(3)
    service.list()
    service.sent()

    assert message.text == "hey"
    assert [call[:2] for call in client.calls] == [
        ("POST", "direct_messages/new"),
        ("GET", "direct_messages/show"),
        ("POST", "direct_messages/destroy"),
        ("GET", "direct_messages"),
        ("GET", "direct_messages/sent"),
    ]
    assert client.calls[0][2].get("screen_name") == "alice"


def test_users_lookup_joins_screen_names() -> None:
    client = FakeApiClient([{"id": 1, "screen_name": "a"}, {"id": 2, "screen_name": "b"}])

    users = UserService(client).lookup(screen_names=["a", "b"])

    assert [user.screen_name for user in users] == ["a", "b"]
    method, endpoint, params, _ = client.calls[0]
    assert (method, endpoint) == ("POST", "users/lookup")
    assert params.get("screen_name") == "a,b"


def test_users_lookup_falls_back_to_ids() -> None:
    client = FakeApiClient([])

    UserService(client).lookup(user_ids=[1, 2, 3])

    assert client.calls[0][2].get("user_id") == "1,2,3"


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"screen_names": [f"user{i}" for i in range(101)]},
        {"user_ids": list(range(101))},
    ],
)
def test_users_lookup_rejects_invalid_requests(kwargs) -> None:
    client = FakeApiClient([])

    with pytest.raises(InvalidArgumentError):
        UserService(client).lookup(**kwargs)

    assert client.calls == []


def test_users_show_and_search() -> None:
    client = FakeApiClient({"id": 9})
    service = UserService(client)

    service.show("bob")
    service.show(options={"user_id": 9})

    assert client.calls[0][2].get("screen_name") == "bob"
    assert "screen_name" not in client.calls[1][2]
    assert client.calls[1][2].get("user_id") == "9"

    client.response = [{"id": 9}]
    assert service.search("bob")[0].id == 9
    assert client.calls[2][:2] == ("GET", "users/search")


def test_account_background_image_is_base64_encoded() -> None:
    client = FakeApiClient({"id": 1})
    service = AccountService(client)

    service.update_profile_background_image(b"img")
    service.update_profile_background_image(None)

    first, second = client.calls[0][2], client.calls[1][2]
    assert first.get("image") == "aW1n"
    assert first.get("use") == "true"
    assert "image" not in second
    assert second.get("use") == "false"


def test_account_enable_sms_selects_device() -> None:
    client = FakeApiClient()
    service = AccountService(client)

    assert service.enable_sms(True) is None
    service.enable_sms(False)

    assert [call[2].get("device") for call in client.calls] == ["sms", "none"]
    assert client.calls[0][:2] == ("POST", "account/update_delivery_device")


def test_account_settings_and_profile() -> None:
    client = FakeApiClient({"screen_name": "bob", "time_zone": {"name": "Tokyo"}})
    service = AccountService(client)

    settings = service.settings()
    service.update_profile(ProfileOptions(location="Kyoto"))
    service.update_profile_image(b"png")

    assert isinstance(settings, AccountSettings)
    assert settings.time_zone.name == "Tokyo"
    assert client.calls[1][:2] == ("POST", "account/update_profile")
    assert client.calls[1][2].get("location") == "Kyoto"
    assert client.calls[2][2].get("image") == "cG5n"


def test_verify_credentials_returns_user() -> None:
    client = FakeApiClient({"id": 1, "screen_name": "me"})

    user = AccountService(client).verify_credentials()

    assert isinstance(user, User)
    assert client.calls[0][:2] == ("GET", "account/verify_credentials")


@pytest.mark.parametrize("service_class, resource", [(FriendsService, "friends"), (FollowersService, "followers")])
def test_ids_cursor_is_sent_only_when_set(service_class, resource) -> None:
    client = FakeApiClient({"ids": [1, 2], "next_cursor": 42})
    service = service_class(client)

    page = service.ids(screen_name="bob")
    service.ids(user_id=7, cursor=42)

    assert isinstance(page, Cursor)
    assert page.next_cursor == 42
    first, second = client.calls[0][2], client.calls[1][2]
    assert client.calls[0][1] == f"{resource}/ids"
    assert first.items() == [("screen_name", "bob")]
    assert second.items() == [("user_id", "7"), ("cursor", "42")]


def test_help_texts_are_unwrapped() -> None:
    client = FakeApiClient({"privacy": "Be safe", "tos": "Be nice"})
    service = HelpService(client)

    assert service.privacy_policy() == "Be safe"
    assert service.tos() == "Be nice"


def test_help_limits_are_keyed_by_resource() -> None:
    client = FakeApiClient(
        {
            "rate_limit_context": {"access_token": "abc"},
            "resources": {"statuses": {"/statuses/home_timeline": {"limit": 15, "remaining": 14, "reset": 1}}},
        }
    )

    limits = HelpService(client).limits()

    assert isinstance(limits, Limits)
    assert limits.resources["statuses"]["/statuses/home_timeline"].remaining == 14
    assert client.calls[0][1] == "application/rate_limit_status"


def test_lists_and_search_groups() -> None:
    client = FakeApiClient([{"id": 1, "name": "friends"}])

    lists = ListService(client).get_all("bob")

    assert lists[0].name == "friends"
    assert client.calls[0][2].get("screen_name") == "bob"

    client.response = {"statuses": []}
    assert SearchService(client).tweets("q").statuses == []
    assert client.calls[1][:2] == ("GET", "search/tweets")


def test_remaining_account_and_help_endpoints() -> None:
    client = FakeApiClient({"short_url_length": 23, "photo_sizes": {"thumb": {"w": 150, "h": 150}}})

    configuration = HelpService(client).configuration()
    AccountService(client).update_settings({"lang": "ja"})
    AccountService(client).update_profile_colors({"profile_link_color": "0084B4"})

    assert configuration.short_url_length == 23
    assert configuration.photo_sizes["thumb"].w == 150
    assert [call[:2] for call in client.calls] == [
        ("GET", "help/configuration"),
        ("POST", "account/settings"),
        ("POST", "account/update_profile_colors"),
    ]
    assert client.calls[1][2].get("lang") == "ja"
