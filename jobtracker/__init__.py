"""Track job applications: storage, filtering, sorting and a desktop window."""

__version__ = "0.1.0"