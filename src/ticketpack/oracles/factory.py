"""Oracle factory."""

from __future__ import annotations

from ticketpack.contracts.config import TicketPackConfig
from ticketpack.contracts.exceptions import ConfigError
from ticketpack.contracts.oracle import GenerationOracle
from ticketpack.oracles.openai import OpenAICompatibleOracle
from ticketpack.oracles.replay import ReplayOracle


def create_oracle(config: TicketPackConfig) -> GenerationOracle:
    if config.oracle == "openai":
        return OpenAICompatibleOracle.from_config(config)
    if config.oracle == "replay":
        if config.replay_path is None:
            raise ConfigError("replay oracle requires replay_path")
        return ReplayOracle(config.replay_path)
    raise ConfigError(f"Unknown oracle: {config.oracle}")
