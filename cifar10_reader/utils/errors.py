"""
Exception hierarchy for the CIFAR-10 reader.

Each failure mode raises a specific error type so callers can tell a bad
configuration from a damaged shard file.
"""


class Cifar10Error(Exception):
    """Base exception for all CIFAR-10 reader failures."""


class Cifar10ConfigError(Cifar10Error):
    """Raised for invalid reader configuration."""


class MalformedShardError(Cifar10Error):
    """Raised when a shard file is too short for the records requested."""


class ImageLayoutError(Cifar10Error):
    """Raised when an image object cannot hold one record's pixels."""
