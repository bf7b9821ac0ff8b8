"""Line rasterization, scan-line polygon fill and a lit-sphere scene model."""

__version__ = "0.1.0"
__all__ = ["lines", "fill", "lighting"]