"""Command-line tools for raw 16-bit PCM audio: synthesis, FFT band-pass
filtering, downsampling, data listings, TCP/UDP streaming, and small
calculator, vector and file utilities."""

__version__ = "0.1.0"