"""Module for Jira transition operations."""

import logging
from typing import Any

from ..exceptions import JiraConflictError, JiraValidationError
from ..models.jira import (
    BasicIssue,
    JiraTransition,
    ResourceKind,
    ResourceLocator,
    TransitionInput,
)
from ..models.jira.metadata import format_write_value
from .client import JiraClient
from .constants import TRANSITIONS_EXPAND

logger = logging.getLogger("jira-issues")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations.

    The workflow is never cached: transitions are discovered from the server
    on every call, and status names are whatever the workflow defines.
    """

    def get_transitions(
        self, target: ResourceLocator | BasicIssue
    ) -> list[JiraTransition]:
        """
        Get the transitions currently available on an issue.

        Args:
            target: The issue's transitions locator, or the issue itself

        Returns:
            Available transitions with their screen fields

        Raises:
            JiraNotFoundError: If the issue no longer exists
            JiraPermissionError: If the caller may not view the issue
        """
        locator = self._resolve_locator(target, ResourceKind.TRANSITIONS)
        response = self._request(
            "get",
            locator,
            action="getting transitions",
            params={"expand": TRANSITIONS_EXPAND},
        )
        response = self._expect_dict(response, "get transitions")

        return [
            JiraTransition.from_api_response(transition)
            for transition in response.get("transitions", [])
            if isinstance(transition, dict)
        ]

    def transition(
        self,
        target: ResourceLocator | BasicIssue,
        transition_input: TransitionInput,
    ) -> None:
        """
        Apply a workflow transition.

        The available transitions are fetched again first so that a
        transition that is no longer offered fails loudly instead of being
        silently ignored.

        Args:
            target: The issue's transitions locator, or the issue itself
            transition_input: The transition id, screen field values and an
                optional comment

        Raises:
            JiraValidationError: If no transition id is given or a required
                screen field is missing
            JiraConflictError: If the transition is not available in the
                issue's current state
            JiraNotFoundError: If the issue no longer exists
        """
        transition_id = transition_input.transition_id
        if transition_id is None:
            raise JiraValidationError("A transition id is required")

        locator = self._resolve_locator(target, ResourceKind.TRANSITIONS)
        available = self.get_transitions(locator)
        selected = next((t for t in available if t.id == transition_id), None)
        if selected is None:
            offered = ", ".join(f"{t.id} ({t.name})" for t in available) or "none"
            raise JiraConflictError(
                f"Transition {transition_id} is not available in the issue's "
                f"current state. Available transitions: {offered}"
            )

        missing = [
            meta.name
            for meta in selected.required_fields
            if transition_input.fields.get(meta.id) is None
        ]
        if missing:
            raise JiraValidationError(
                f"Transition {selected.name} requires fields: {', '.join(missing)}",
                errors={name: "Field is required" for name in missing},
            )

        payload = transition_input.to_api_payload()
        if transition_input.fields:
            payload["fields"] = self._format_screen_fields(
                selected, transition_input.fields
            )

        logger.debug(f"Applying transition {selected.id} ({selected.name})")
        self._request(
            "post", locator, action=f"applying transition {selected.id}", data=payload
        )

    def _format_screen_fields(
        self, transition: JiraTransition, values: dict[str, Any]
    ) -> dict[str, Any]:
        metas = {meta.id: meta for meta in transition.fields}
        formatted: dict[str, Any] = {}
        for field_id, value in values.items():
            meta = metas.get(field_id)
            if meta is None:
                formatted[field_id] = value
                continue
            if not meta.accepts(value):
                raise JiraValidationError(
                    f"Invalid value for field {meta.name}: expected {meta.schema_type}",
                    errors={field_id: f"Expected {meta.schema_type}"},
                )
            formatted[field_id] = format_write_value(
                meta.schema_type,
                value,
                items=meta.schema_items,
                is_cloud=self.config.is_cloud,
            )
        return formatted
