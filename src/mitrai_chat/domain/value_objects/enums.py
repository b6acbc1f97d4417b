from __future__ import annotations

from enum import StrEnum


class NotificationType(StrEnum):
    SESSION_REMINDER = "session_reminder"
    STREAK = "streak"
    MISSED_SESSION = "missed_session"
    GOAL_ACHIEVEMENT = "goal_achievement"
    WEEKLY_REPORT = "weekly_report"
    MATCH_FOUND = "match_found"
    BIRTHDAY_WISH = "birthday_wish"
    SESSION_REQUEST = "session_request"
    SESSION_ACCEPTED = "session_accepted"
    SESSION_DECLINED = "session_declined"
    ROOM_JOIN = "room_join"
    ROOM_MESSAGE = "room_message"
    FRIEND_REQUEST = "friend_request"
    FRIEND_ACCEPTED = "friend_accepted"


class ChatAction(StrEnum):
    SEND = "send"
    READ = "read"
    UNREAD = "unread"
