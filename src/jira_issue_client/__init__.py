import json
import logging
import os
from collections.abc import Callable
from functools import wraps
from typing import Any

import click
from dotenv import load_dotenv

from jira_issue_client.exceptions import JiraIssueClientError
from jira_issue_client.jira import JiraConfig, JiraIssueClient
from jira_issue_client.models.jira import TransitionInput
from jira_issue_client.utils.logging import setup_logging

__version__ = "0.1.0"

# Initialize logging with appropriate level
logging_level = logging.WARNING
if os.getenv("JIRA_ISSUES_VERBOSE", "").lower() in ("true", "1", "yes"):
    logging_level = logging.DEBUG

# Set up logging using the utility function
logger = setup_logging(logging_level)


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def _client_command(func: Callable[..., Any]) -> Callable[..., Any]:
    """Build the client from the environment and report client errors cleanly."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            client = JiraIssueClient(config=JiraConfig.from_env())
        except ValueError as e:
            raise click.ClickException(f"Invalid configuration: {e}") from e
        try:
            return func(client, *args, **kwargs)
        except JiraIssueClientError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


def _parse_field_options(values: tuple[str, ...]) -> dict[str, str]:
    fields = {}
    for value in values:
        name, sep, field_value = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(
                f"Expected FIELD_ID=VALUE, got {value!r}", param_hint="--field"
            )
        fields[name.strip()] = field_value
    return fields


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net or https://jira.your-company.com)",
)
@click.option("--jira-username", help="Jira username/email")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--jira-personal-token",
    help="Jira Personal Access Token (for Jira Server/Data Center)",
)
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=None,
    help="Verify SSL certificates for Jira Server/Data Center (default: verify)",
)
def main(
    verbose: int,
    env_file: str | None,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_personal_token: str | None,
    jira_ssl_verify: bool | None,
) -> None:
    """Jira issue client - read, transition and assign Jira issues.

    Supports both Atlassian Cloud and Jira Server/Data Center deployments.
    Authentication methods supported:
    - Username and API token (Cloud, Server/Data Center)
    - Personal Access Token (Server/Data Center)
    """
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    elif os.getenv("JIRA_ISSUES_VERBOSE", "false").lower() in ("true", "1", "yes"):
        current_logging_level = logging.DEBUG
    else:
        current_logging_level = logging.WARNING

    global logger
    logger = setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        load_dotenv(override=True)

    # Command line options take precedence over the environment
    if jira_url:
        os.environ["JIRA_URL"] = jira_url
    if jira_username:
        os.environ["JIRA_USERNAME"] = jira_username
    if jira_token:
        os.environ["JIRA_API_TOKEN"] = jira_token
    if jira_personal_token:
        os.environ["JIRA_PERSONAL_TOKEN"] = jira_personal_token
    if jira_ssl_verify is not None:
        os.environ["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()


@main.command("get")
@click.argument("issue_key")
@_client_command
def get_issue(client: JiraIssueClient, issue_key: str) -> None:
    """Show an issue."""
    _echo_json(client.get_issue(issue_key).to_simplified_dict())


@main.command("transitions")
@click.argument("issue_key")
@_client_command
def list_transitions(client: JiraIssueClient, issue_key: str) -> None:
    """List the transitions available on an issue."""
    issue = client.get_issue(issue_key)
    _echo_json([t.to_simplified_dict() for t in client.get_transitions(issue)])


@main.command("transition")
@click.argument("issue_key")
@click.argument("transition_id")
@click.option(
    "--field",
    "fields",
    multiple=True,
    help="Screen field value as FIELD_ID=VALUE (can be used multiple times)",
)
@click.option("--comment", help="Comment to add with the transition")
@_client_command
def apply_transition(
    client: JiraIssueClient,
    issue_key: str,
    transition_id: str,
    fields: tuple[str, ...],
    comment: str | None,
) -> None:
    """Move an issue through a workflow transition."""
    transition_input = TransitionInput(
        id=transition_id, fields=_parse_field_options(fields), comment=comment
    )
    client.transition(client.get_issue(issue_key), transition_input)
    _echo_json(client.get_issue(issue_key).to_simplified_dict())


@main.command("assignable-users")
@click.argument("issue_key")
@click.option("--start-at", type=int, default=None, help="Index of the first user")
@click.option("--max-results", type=int, default=None, help="Maximum number of users")
@_client_command
def assignable_users(
    client: JiraIssueClient,
    issue_key: str,
    start_at: int | None,
    max_results: int | None,
) -> None:
    """List the users an issue can be assigned to."""
    users = client.get_assignable_users(issue_key, start_at, max_results)
    _echo_json([user.to_simplified_dict() for user in users])


__all__ = ["main", "JiraIssueClient", "JiraConfig", "__version__"]

if __name__ == "__main__":
    main()
