"""Workspace - personal organizer: daily priorities, tasks, quick note and boards."""
