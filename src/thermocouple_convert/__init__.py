from importlib.metadata import version

__version__ = version("thermocouple-convert")
del version

__all__ = ["__version__"]
