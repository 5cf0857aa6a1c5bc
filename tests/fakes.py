from collections import deque
from ecotraffic.domain.models import Intersection


class ScriptedRandom:
    """Random source that replays a fixed sequence of draws.

    Once the script runs out every draw returns the low bound, or the high
    bound when ``exhausted="high"``.
    """

    def __init__(self, values=(), exhausted="low"):
        self.values = deque(values)
        self.exhausted = exhausted
        self.calls = []
        self.seeded_with = None

    def seed(self, n):
        self.seeded_with = n

    def randint(self, a, b):
        self.calls.append((a, b))
        if self.values:
            value = self.values.popleft()
            if not a <= value <= b:
                raise AssertionError(f"scripted draw {value} outside [{a}, {b}]")
            return value
        return b if self.exhausted == "high" else a


def make_intersection(vehicles=20, wait=30, queue=5, idle=60, status="red", name="Test Ave & 9th St"):
    return Intersection(
        intersection=name,
        vehicleCount=vehicles,
        avgWaitTime=wait,
        congestionLevel="low",
        lightStatus=status,
        mlRecommendation="",
        coordinates={"x": 0, "y": 0},
        efficiency=0,
        queueLength=queue,
        idleTime=idle,
        co2Emissions=0.0,
        fuelConsumption=0.0,
    )
