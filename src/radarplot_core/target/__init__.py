from .types import TargetState
from .evaluator import evaluate_target

__all__ = [
    'TargetState',
    'evaluate_target',
]
