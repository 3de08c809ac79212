"""ProjectHub: project management backend with per-resource access control."""

__version__ = "0.1.0"
