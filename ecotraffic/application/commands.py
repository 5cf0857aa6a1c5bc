import logging
from abc import ABC, abstractmethod
from typing import Any, Optional
from ecotraffic.domain.models import CommandResult, SignalState, TrafficLight
from ecotraffic.systems.signal_system import SignalSystem

logger = logging.getLogger(__name__)

class Command(ABC):
    @abstractmethod
    def execute(self, kernel: Any) -> CommandResult:
        pass

class LightCommand(Command):
    """Command addressed to a single traffic light. Unknown ids are a no-op."""

    def __init__(self, light_id: str):
        self.light_id = light_id

    def execute(self, kernel: Any) -> CommandResult:
        light: Optional[TrafficLight] = kernel.state.lights.get(self.light_id)
        if not light:
            logger.warning("%s ignored: unknown light %s", type(self).__name__, self.light_id)
            return CommandResult(applied=False, lightId=self.light_id, detail="Traffic light not found")

        detail = self.apply(light)
        logger.info("%s: %s", self.light_id, detail)
        return CommandResult(applied=True, lightId=self.light_id, detail=detail,
                             light=light.model_copy(deep=True))

    @abstractmethod
    def apply(self, light: TrafficLight) -> str:
        pass

class SetAutoModeCommand(LightCommand):
    def __init__(self, light_id: str, enabled: bool):
        super().__init__(light_id)
        self.enabled = enabled

    def apply(self, light: TrafficLight) -> str:
        light.autoMode = self.enabled
        return "auto mode on" if self.enabled else "manual mode on"

class SetEcoModeCommand(LightCommand):
    def __init__(self, light_id: str, enabled: bool):
        super().__init__(light_id)
        self.enabled = enabled

    def apply(self, light: TrafficLight) -> str:
        # Takes effect at the next phase transition
        light.ecoMode = self.enabled
        return "eco mode on" if self.enabled else "eco mode off"

class SetOptimizedCommand(LightCommand):
    def __init__(self, light_id: str, enabled: bool):
        super().__init__(light_id)
        self.enabled = enabled

    def apply(self, light: TrafficLight) -> str:
        light.cycleOptimized = self.enabled
        return "cycle optimization on" if self.enabled else "cycle optimization off"

class ManualPhaseCommand(LightCommand):
    def __init__(self, light_id: str, phase: SignalState):
        super().__init__(light_id)
        self.phase = SignalState(phase)

    def apply(self, light: TrafficLight) -> str:
        SignalSystem.force_phase(light, self.phase)
        return f"phase forced to {self.phase.value}"
