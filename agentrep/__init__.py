"""
AgentRep — Reputation scoring for on-chain AI agents.
"""
__version__ = "2.0.0"
