"""
trackpack.extract - Audio track extraction from video files.

Runs FFmpeg once per track: the default audio stream first, then one
invocation per declared track in ordinal order.
"""

from __future__ import annotations
