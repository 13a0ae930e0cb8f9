"""Simulated firewall control plane: rule evaluation, sessions, audit trail, metrics and a worker pool."""

__version__ = "0.1.0"