from .start import show_demo

__all__ = ["show_demo"]
