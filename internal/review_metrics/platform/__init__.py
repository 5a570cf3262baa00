"""Platform-only metric calculators, one module per platform."""

from . import booking, facebook, google, tripadvisor

__all__ = ["booking", "facebook", "google", "tripadvisor"]
