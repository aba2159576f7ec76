"""Lidar model parameters, block timing, M2 packet parsing, point types and packet utilities."""

__version__ = "1.5.3"