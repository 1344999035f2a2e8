"""
NativeKit - discovery and capability checks for native C/C++ toolchains.
"""

__version__ = "0.1.0"
