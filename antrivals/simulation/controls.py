"""FrameControls — global inputs written by a UI between frames.

The engine only reads these.  ``reset_requested`` is edge-triggered:
the engine clears it after performing the reset.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FrameControls:
    """Global per-frame knobs.

    Attributes:
        steps_per_frame: Physics steps per frame (time acceleration, >= 1).
        leaf_spawn_probability: Base chance of a new leaf each step.
        paused: When True a frame runs zero physics steps.
        reset_requested: Set by a UI to restart on the next frame.
    """

    steps_per_frame: int = 1
    leaf_spawn_probability: float = 0.042
    paused: bool = False
    reset_requested: bool = False
