"""Audio transcription pipeline: upload, transcribe, extract and analyze."""

__version__ = "0.1.0"
