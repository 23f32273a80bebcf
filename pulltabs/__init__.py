"""Pull Tabs - GitHub pull request label notifier for Slack."""

__version__ = "0.1.0"
