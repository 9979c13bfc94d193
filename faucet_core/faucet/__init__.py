"""Faucet conversation module."""

from .agent import FaucetAgent, IFaucetAgent
from .channel import CollectingChannel, IReplyChannel

__all__ = ["CollectingChannel", "FaucetAgent", "IFaucetAgent", "IReplyChannel"]
