import pytest

from diagram_engine.noise import NoiseSource, RandomSource


class ConstantNoise(NoiseSource):
    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def noise2d(self, x: float, y: float) -> float:
        self.calls += 1
        return self.value


class ConstantRandom(RandomSource):
    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def constant_noise():
    return ConstantNoise


@pytest.fixture
def constant_random():
    return ConstantRandom
