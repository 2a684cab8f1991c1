"""HTTP endpoint for Slack slash commands."""
