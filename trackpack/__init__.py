"""
Trackpack - extract named audio tracks from MP4 files and zip them.

Picks a video under the working directory, runs ffmpeg once per declared
audio track (plus the default track), and packages the results:
file discovery → track parsing → audio extraction → zip archive.
"""

__version__ = "0.1.0"
