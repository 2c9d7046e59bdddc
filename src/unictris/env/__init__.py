"""Gymnasium environments for Unictris."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="Unictris-10x20-v0",
    entry_point="unictris.env.tetris_env:UnictrisEnv",
)

__all__ = ["Unictris-10x20-v0"]
