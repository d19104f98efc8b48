"""Render release and commit data into markdown changelogs."""
