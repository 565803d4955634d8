from .base import VectorCommitmentScheme
from .kzg_fk import KZGFK
