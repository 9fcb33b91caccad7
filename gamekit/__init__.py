"""Engine-independent game building blocks: 2D/3D math, transforms, UI element trees, resource caches and a virtual screen."""

__version__ = "0.1.0"