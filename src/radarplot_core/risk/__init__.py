"""
Risk Module

충돌 위험 평가:
- CPA/TCPA 계산
- Bow crossing (BCR/BCT) 계산
"""

from .types import (
    CPAData,
    BowCrossingData,
)

from .cpa_tcpa import (
    calculate_cpa
)

from .bow_crossing import (
    calculate_bow_crossing
)

__all__ = [
    # Result types
    'CPAData',
    'BowCrossingData',

    # CPA/TCPA functions
    'calculate_cpa',

    # Bow crossing functions
    'calculate_bow_crossing',
]
