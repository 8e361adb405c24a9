"""Tests for the Jira Comments mixin."""

import pytest

from jira_issue_client.exceptions import JiraPermissionError, JiraValidationError
from jira_issue_client.models.jira import CommentInput, JiraComment, ResourceKind
from tests.fixtures.jira_mocks import ISSUE_SELF, make_http_error

COMMENTS_URI = f"{ISSUE_SELF}/comment"

MOCK_COMMENT_RESPONSE = {
    "id": "10001",
    "self": f"{COMMENTS_URI}/10001",
    "body": "Looks good",
    "author": {"accountId": "123", "displayName": "Test User"},
    "created": "2024-01-03T09:00:00.000+0000",
    "updated": "2024-01-03T09:00:00.000+0000",
}


def test_add_comment(jira_client, issue):
    jira_client.jira.post.return_value = MOCK_COMMENT_RESPONSE

    comment = jira_client.add_comment(issue, "Looks good")

    jira_client.jira.post.assert_called_once_with(
        COMMENTS_URI, params=None, absolute=True, data={"body": "Looks good"}
    )
    assert isinstance(comment, JiraComment)
    assert comment.id == "10001"
    assert comment.body == "Looks good"
    assert comment.author.display_name == "Test User"
    assert comment.created.year == 2024


def test_add_restricted_comment(jira_client, issue):
    jira_client.jira.post.return_value = {
        **MOCK_COMMENT_RESPONSE,
        "visibility": {"type": "role", "value": "Developers"},
    }

    comment = jira_client.add_comment(
        issue.locator(ResourceKind.COMMENTS),
        CommentInput(
            body="Internal note", visibility_type="role", visibility_value="Developers"
        ),
    )

    assert jira_client.jira.post.call_args.kwargs["data"] == {
        "body": "Internal note",
        "visibility": {"type": "role", "value": "Developers"},
    }
    assert comment.visibility == {"type": "role", "value": "Developers"}


def test_incomplete_visibility_is_not_sent(jira_client, issue):
    jira_client.jira.post.return_value = MOCK_COMMENT_RESPONSE

    jira_client.add_comment(issue, CommentInput(body="x", visibility_type="group"))

    assert jira_client.jira.post.call_args.kwargs["data"] == {"body": "x"}


@pytest.mark.parametrize("body", ["", "   \n"])
def test_empty_body(jira_client, issue, body):
    with pytest.raises(JiraValidationError):
        jira_client.add_comment(issue, body)

    jira_client.jira.post.assert_not_called()


def test_permission_denied(jira_client, issue):
    jira_client.jira.post.side_effect = make_http_error(403)

    with pytest.raises(JiraPermissionError):
        jira_client.add_comment(issue, "Hello")
