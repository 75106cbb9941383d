"""
mathify/math_engine/seeding.py
Seeded value source for question generation.

Generators never read the clock. A batch gets one base seed (time-derived
only when the caller does not pass one) and every slot/attempt derives its
own Seed from it, so a fixed base seed reproduces a batch exactly.
"""
import time
from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar

PRIME_A = 7919
PRIME_B = 9973
SLOT_STRIDE = 137
ATTEMPT_STRIDE = 1009

T = TypeVar("T")


def clock_seed() -> int:
    return int(time.time() * 1000) % 10000


def resolve_seed(seed: Optional[int]) -> int:
    return clock_seed() if seed is None else int(seed)


@dataclass(frozen=True)
class Seed:
    value: int

    @classmethod
    def for_slot(cls, base: int, index: int, attempt: int = 0) -> "Seed":
        return cls(base + index * SLOT_STRIDE + attempt * ATTEMPT_STRIDE)

    def draw(self, modulus: int, prime: int = PRIME_A) -> int:
        """Value in [0, modulus)."""
        modulus = int(modulus)
        if modulus <= 0:
            return 0
        return (self.value * prime) % modulus

    def between(self, low: int, high: int, prime: int = PRIME_A) -> int:
        """Value in [low, high], inclusive."""
        if high <= low:
            return low
        return low + self.draw(high - low + 1, prime)

    def choice(self, items: Sequence[T], prime: int = PRIME_A, offset: int = 0) -> T:
        return items[(self.draw(len(items), prime) + offset) % len(items)]

    def shifted(self, step: int) -> "Seed":
        return Seed(self.value + step)
