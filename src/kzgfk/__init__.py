from .commitment import KZGFK
from .domain import Domain
from .ecc import EllipticCurve
from .errors import DomainError, KZGFKError, SetupError
from .setup import SRS, generate_srs
