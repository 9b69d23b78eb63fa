"""Slack workspace tools for the Model Context Protocol."""
