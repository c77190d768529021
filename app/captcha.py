"""Slider captcha gating link and note creation.

The user is shown a target in [10, 90] and must move a 0-100 slider to within
a small tolerance of it. Moving back out of tolerance revokes verification.
"""

from __future__ import annotations

import random
import uuid

from pydantic import BaseModel

TARGET_MIN = 10
TARGET_MAX = 90
SLIDER_MIN = 0
SLIDER_MAX = 100
TOLERANCE = 3


def _draw_target(rng: random.Random | None) -> int:
    return (rng or random).randint(TARGET_MIN, TARGET_MAX)


class SliderCaptcha(BaseModel):
    id: str
    target: int
    value: int = SLIDER_MIN
    verified: bool = False
    interacted: bool = False

    @classmethod
    def issue(cls, rng: random.Random | None = None) -> SliderCaptcha:
        return cls(id=uuid.uuid4().hex, target=_draw_target(rng))

    def slide(self, value: int, tolerance: int = TOLERANCE) -> bool:
        """Record a slider position and return whether the challenge is verified."""
        if not SLIDER_MIN <= value <= SLIDER_MAX:
            raise ValueError(f"Slider value must be between {SLIDER_MIN} and {SLIDER_MAX}")

        self.value = value
        self.interacted = True
        self.verified = abs(value - self.target) <= tolerance
        return self.verified

    def reset(self, rng: random.Random | None = None) -> None:
        self.target = _draw_target(rng)
        self.value = SLIDER_MIN
        self.verified = False
        self.interacted = False
