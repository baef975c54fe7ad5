"""ProMa: boards, projects and time-tracking sessions."""

__version__ = "1.0.0"
