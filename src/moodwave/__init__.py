"""Moodwave: mood-based playlist generation on top of the Spotify Web API."""
