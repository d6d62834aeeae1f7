"""TermGate - taxonomy term access restrictions for catalogue content."""

__version__ = "1.0.0"
