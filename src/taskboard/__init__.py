"""Taskboard - grouped and sorted ticket board."""
