from courtpairing.controllers.result_recorder import ResultRecorder
from courtpairing.controllers.round_manager import RoundManager

__all__ = ["ResultRecorder", "RoundManager"]
