"""atlas-slicer — slice sprite sheets from texture-atlas XML descriptors."""

__version__ = '0.1.0'
