from typing import Any, List, Optional


class CareerSimulationError(Exception):
    """Base class for every error raised by the career simulation subsystem."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SimulationValidationError(CareerSimulationError):
    """Raised when a simulation request is rejected before any simulation runs."""
    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        self.errors = errors or []
        super().__init__(message)


class ComputationGuardError(CareerSimulationError):
    """
    Raised when a score would divide by zero (e.g. a final salary of 0).
    Only reachable with input that skipped the salary > 0 validation.
    """


class SimulationNotFoundError(CareerSimulationError):
    def __init__(self, simulation_id: int):
        self.simulation_id = simulation_id
        super().__init__("Simulation not found")


class PathNotFoundError(CareerSimulationError):
    def __init__(self, path_id: str):
        self.path_id = path_id
        super().__init__("Path not found in simulation")


class SimulationStorageError(CareerSimulationError):
    """Wraps database failures; the original cause is kept in the message and __cause__."""
