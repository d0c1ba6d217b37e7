"""
Endpoint wrappers grouped the way the REST API groups its resources.

Each service holds a reference to the :class:`twitter_rest.client.Client`
that dispatches its calls.
"""

from twitter_rest.services.account_service import AccountService
from twitter_rest.services.dm_service import DirectMessageService
from twitter_rest.services.friendship_service import FollowersService, FriendsService
from twitter_rest.services.help_service import HelpService
from twitter_rest.services.list_service import ListService
from twitter_rest.services.options import (
    AccountSettingsOptions,
    MessageOptions,
    ProfileColorOptions,
    ProfileOptions,
    SearchOptions,
    TimelineOptions,
    TweetOptions,
    UserOptions,
)
from twitter_rest.services.search_service import SearchService
from twitter_rest.services.tweet_service import TweetService
from twitter_rest.services.user_service import UserService

__all__ = [
    "AccountService",
    "AccountSettingsOptions",
    "DirectMessageService",
    "FollowersService",
    "FriendsService",
    "HelpService",
    "ListService",
    "MessageOptions",
    "ProfileColorOptions",
    "ProfileOptions",
    "SearchOptions",
    "SearchService",
    "TimelineOptions",
    "TweetOptions",
    "TweetService",
    "UserOptions",
    "UserService",
]
