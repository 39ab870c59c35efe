"""Python client for the task API and its notification channel."""

from taskhub.client.api_client import TaskApiClient, TaskApiError, TaskItem
from taskhub.client.board import ConnectionState, Notice, TaskBoard
from taskhub.client.config import ClientSettings
from taskhub.client.listener import ChannelListener

__all__ = [
    "ChannelListener",
    "ClientSettings",
    "ConnectionState",
    "Notice",
    "TaskApiClient",
    "TaskApiError",
    "TaskBoard",
    "TaskItem",
]
