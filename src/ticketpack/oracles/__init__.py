"""Generation oracle implementations."""

from ticketpack.oracles.factory import create_oracle
from ticketpack.oracles.openai import OpenAICompatibleOracle
from ticketpack.oracles.replay import ReplayOracle

__all__ = ["OpenAICompatibleOracle", "ReplayOracle", "create_oracle"]
