"""Service layer: GitHub intake, Slack delivery, status page."""
