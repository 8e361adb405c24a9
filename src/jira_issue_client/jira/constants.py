"""Constants specific to Jira issue operations."""

# Largest page the client requests; larger max_results are clamped to it
MAX_RESULTS_CEILING = 1000

# Query expansions
ISSUE_EXPAND = "names"
TRANSITIONS_EXPAND = "transitions.fields"

# Assignee values understood by the assignee resource
AUTOMATIC_ASSIGNEE = "-1"

# Attachments are rejected by Jira's XSRF check without this header
ATTACHMENT_HEADERS = {"X-Atlassian-Token": "no-check"}
