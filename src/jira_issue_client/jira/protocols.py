"""Module for Jira protocol definitions."""

from abc import abstractmethod
from typing import Protocol

from ..models.jira import JiraUser


class UsersOperationsProto(Protocol):
    """Protocol defining user operations interface."""

    @abstractmethod
    def get_current_user(self) -> JiraUser:
        """
        Get the authenticated user.

        Returns:
            The user the client acts as
        """
