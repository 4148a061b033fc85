"""Resume compliance checks and dual ATS/recruiter scoring."""

__version__ = "0.1.0"
