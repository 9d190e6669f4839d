"""PageSight — full-page web screenshots with gaze heatmap overlays."""

__version__ = "0.1.0"
