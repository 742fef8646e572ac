"""Control shell around an embedded falling-sand simulation."""

__version__ = "0.3.0"
