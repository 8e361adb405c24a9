"""Tests for the Jira Transitions mixin."""

import pytest

from jira_issue_client.exceptions import (
    JiraConflictError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraValidationError,
)
from jira_issue_client.models.jira import ResourceKind, TransitionInput
from tests.fixtures.jira_mocks import (
    ISSUE_SELF,
    MOCK_TRANSITIONS_RESPONSE,
    make_http_error,
)

TRANSITIONS_URI = f"{ISSUE_SELF}/transitions"


class TestGetTransitions:
    """Tests for transition discovery."""

    def test_by_issue(self, jira_client, issue):
        jira_client.jira.get.return_value = MOCK_TRANSITIONS_RESPONSE

        transitions = jira_client.get_transitions(issue)

        jira_client.jira.get.assert_called_once_with(
            TRANSITIONS_URI, params={"expand": "transitions.fields"}, absolute=True
        )
        assert [t.id for t in transitions] == ["11", "21"]
        assert transitions[0].to_status.name == "In Progress"

    def test_by_locator_is_the_same_request(self, jira_client, issue):
        jira_client.jira.get.return_value = MOCK_TRANSITIONS_RESPONSE

        by_issue = jira_client.get_transitions(issue)
        by_locator = jira_client.get_transitions(
            issue.locator(ResourceKind.TRANSITIONS)
        )

        assert by_issue == by_locator
        first, second = jira_client.jira.get.call_args_list
        assert first == second

    def test_screen_fields(self, jira_client, issue):
        jira_client.jira.get.return_value = MOCK_TRANSITIONS_RESPONSE

        resolve = jira_client.get_transitions(issue)[1]

        assert {f.id for f in resolve.fields} == {"resolution", "fixVersions"}
        # fixVersions has a default, so only resolution must be supplied
        assert [f.id for f in resolve.required_fields] == ["resolution"]

    def test_wrong_locator_kind(self, jira_client, issue):
        with pytest.raises(JiraValidationError):
            jira_client.get_transitions(issue.locator(ResourceKind.VOTES))
        jira_client.jira.get.assert_not_called()

    @pytest.mark.parametrize(
        ("status_code", "error_class"),
        [(404, JiraNotFoundError), (403, JiraPermissionError)],
    )
    def test_server_errors(self, jira_client, issue, status_code, error_class):
        jira_client.jira.get.side_effect = make_http_error(status_code)

        with pytest.raises(error_class):
            jira_client.get_transitions(issue)


class TestTransition:
    """Tests for applying transitions."""

    def test_applies_offered_transition(self, jira_client, issue):
        jira_client.jira.get.return_value = MOCK_TRANSITIONS_RESPONSE

        jira_client.transition(issue, TransitionInput(id=11))

        jira_client.jira.post.assert_called_once_with(
            TRANSITIONS_URI,
            params=None,
            absolute=True,
            data={"transition": {"id": "11"}},
        )

    def test_sends_fields_and_comment(self, jira_client, issue):
        jira_client.jira.get.return_value = MOCK_TRANSITIONS_RESPONSE

        jira_client.transition(
            issue,
            TransitionInput(
                id="21", fields={"resolution": "Fixed"}, comment="Fixed in build 42"
            ),
        )

        payload = jira_client.jira.post.call_args.kwargs["data"]
        assert payload == {
            "transition": {"id": "21"},
            "fields": {"resolution": {"name": "Fixed"}},
            "update": {"comment": [{"add": {"body": "Fixed in build 42"}}]},
        }

    def test_missing_id_fails_before_any_request(self, jira_client, issue):
        with pytest.raises(JiraValidationError, match="transition id is required"):
            jira_client.transition(issue, TransitionInput())

        jira_client.jira.get.assert_not_called()
        jira_client.jira.post.assert_not_called()

    def test_unavailable_transition_conflicts(self, jira_client, issue):
        jira_client.jira.get.return_value = MOCK_TRANSITIONS_RESPONSE

        with pytest.raises(JiraConflictError, match="11 \\(Start Progress\\)"):
            jira_client.transition(issue, TransitionInput(id="99"))

        jira_client.jira.post.assert_not_called()

    def test_discovered_ids_are_exactly_the_accepted_ones(self, jira_client, issue):
        jira_client.jira.get.return_value = MOCK_TRANSITIONS_RESPONSE
        offered = {t.id for t in jira_client.get_transitions(issue)}

        for transition_id in offered:
            fields = {"resolution": "Fixed"} if transition_id == "21" else {}
            jira_client.transition(
                issue, TransitionInput(id=transition_id, fields=fields)
            )
        for transition_id in {"1", "31", "211"} - offered:
            with pytest.raises(JiraConflictError):
                jira_client.transition(issue, TransitionInput(id=transition_id))

    def test_missing_required_field(self, jira_client, issue):
        jira_client.jira.get.return_value = MOCK_TRANSITIONS_RESPONSE

        with pytest.raises(JiraValidationError) as exc_info:
            jira_client.transition(issue, TransitionInput(id="21"))

        assert exc_info.value.errors == {"Resolution": "Field is required"}
        jira_client.jira.post.assert_not_called()

    def test_field_type_mismatch(self, jira_client, issue):
        jira_client.jira.get.return_value = MOCK_TRANSITIONS_RESPONSE

        with pytest.raises(JiraValidationError, match="Fix Version/s"):
            jira_client.transition(
                issue,
                TransitionInput(
                    id="21", fields={"resolution": "Fixed", "fixVersions": "1.0"}
                ),
            )

    def test_vanished_issue(self, jira_client, issue):
        jira_client.jira.get.side_effect = make_http_error(
            404, {"errorMessages": ["Issue does not exist"], "errors": {}}
        )

        with pytest.raises(JiraNotFoundError, match="Issue does not exist"):
            jira_client.transition(issue, TransitionInput(id="11"))

        jira_client.jira.post.assert_not_called()

    def test_server_conflict_is_not_retried(self, jira_client, issue):
        jira_client.jira.get.return_value = MOCK_TRANSITIONS_RESPONSE
        jira_client.jira.post.side_effect = make_http_error(409)

        with pytest.raises(JiraConflictError):
            jira_client.transition(issue, TransitionInput(id="11"))

        assert jira_client.jira.post.call_count == 1
