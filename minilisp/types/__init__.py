from minilisp.types.symbol import Symbol
from minilisp.types.unit import Unit
from minilisp.types.environment import Environment
from minilisp.types.closure import Closure

__all__ = ["Symbol", "Unit", "Environment", "Closure"]
