"""Static replies substituted when the completion provider fails."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

FALLBACK_RESPONSES: tuple[str, ...] = (
    "Sorry, I'm having some technical trouble right now 😅 Try again a bit later!",
    "Something's off with the connection... but I'm here and ready to help as soon as it's back! 🔧",
    "The AI service is having problems at the moment. Don't worry, it'll be working again soon! ⚡",
)

FallbackSelector = Callable[[Sequence[str]], str]


def random_fallback(options: Sequence[str]) -> str:
    return random.choice(options)  # noqa: S311 -- not security sensitive
