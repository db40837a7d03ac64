"""Singularity Lambda gateways and service-worker build tooling."""

__version__ = "0.1.0"
