"""soliddemo — five small demonstrations of the SOLID design principles."""

__version__ = "0.1.0"
