from typing import Iterable, Tuple
from ecotraffic.domain.models import TrafficLight, SignalState
from ecotraffic.domain import config

class SignalSystem:
    def update(self, lights: Iterable[TrafficLight], dt: int = config.TICK_SECONDS):
        for light in lights:
            if not light.autoMode:
                continue

            light.timeRemaining -= dt
            if light.timeRemaining <= 0:
                self._switch_signal_phase(light)

    def _switch_signal_phase(self, light: TrafficLight):
        light.status, light.timeRemaining = self.next_phase(light)

    @staticmethod
    def next_phase(light: TrafficLight) -> Tuple[SignalState, int]:
        # Cycle: GREEN -> YELLOW -> RED -> GREEN
        if light.status == SignalState.GREEN:
            return SignalState.YELLOW, config.YELLOW_TIME
        if light.status == SignalState.YELLOW:
            # Eco mode shortens red to cut idling
            if light.ecoMode:
                return SignalState.RED, config.RED_TIME_ECO
            if light.cycleOptimized:
                return SignalState.RED, config.RED_TIME_OPTIMIZED
            return SignalState.RED, config.RED_TIME_DEFAULT
        # Eco mode extends green for better flow
        if light.ecoMode:
            return SignalState.GREEN, config.GREEN_TIME_ECO
        if light.cycleOptimized:
            return SignalState.GREEN, config.GREEN_TIME_OPTIMIZED
        return SignalState.GREEN, config.GREEN_TIME_DEFAULT

    @staticmethod
    def force_phase(light: TrafficLight, phase: SignalState):
        light.status = phase
        light.timeRemaining = config.MANUAL_PHASE_TIME
