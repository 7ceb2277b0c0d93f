"""Saving generated track lists as Spotify playlists."""

from moodwave.playlists.service import PlaylistService

__all__ = ["PlaylistService"]
