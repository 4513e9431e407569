"""TubeSage — coalesce timestamped transcripts into reading blocks."""

__version__ = "0.1.0"
