"""Scripted faucet conversations for local testing."""

from .sim import ISim, Sim

__all__ = ["ISim", "Sim"]
