"""
Sources of uniform integers for tile insertion.

Insertion only needs `randrange(stop)`, returning an int uniform over
[0, stop). The `random` module and `random.Random` instances already
provide it; the classes here adapt numpy and torch generators and add a
scripted source for reproducible tests.
"""

import numpy as np
import torch


class NumpySource:
    """Uniform integers from a numpy Generator"""

    generator: np.random.Generator

    def __init__(self, generator: np.random.Generator | None = None, seed: int | None = None):
        if generator is None:
            generator = np.random.default_rng(seed)
        self.generator = generator

    def randrange(self, stop: int) -> int:
        return int(self.generator.integers(stop))


class TorchSource:
    """Uniform integers from a torch Generator"""

    generator: torch.Generator

    def __init__(self, generator: torch.Generator | None = None, seed: int | None = None):
        if generator is None:
            generator = torch.Generator()
            if seed is None:
                generator.seed()
            else:
                generator.manual_seed(seed)
        self.generator = generator

    def randrange(self, stop: int) -> int:
        return int(torch.randint(stop, (1,), generator=self.generator).item())


class ScriptedSource:
    """
    Replays a fixed list of integers, each reduced modulo `stop`.

    Raises IndexError once the list runs out.
    """

    def __init__(self, values):
        self.values = list(values)
        self.position = 0

    @property
    def remaining(self) -> int:
        return len(self.values) - self.position

    def randrange(self, stop: int) -> int:
        if self.position >= len(self.values):
            raise IndexError(f"Scripted source exhausted after {len(self.values)} draws")
        value = self.values[self.position]
        self.position += 1
        return value % stop
