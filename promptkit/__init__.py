"""Building blocks for a shell prompt: tool versions, VCS details, clock, Kubernetes and system facts."""

__version__ = "0.1.0"