from .api import ExecutionResult, run_file, run_string
from .config import RunConfig
from .engine import Interpreter
from .errors import (
    BFRunError,
    InputFailureError,
    PointerOverflowError,
    PointerUnderflowError,
    UnmatchedBracketError,
)
from .tape import MemoryTape

__all__ = [
    'Interpreter',
    'MemoryTape',
    'RunConfig',
    'ExecutionResult',
    'run_string',
    'run_file',
    'BFRunError',
    'PointerOverflowError',
    'PointerUnderflowError',
    'UnmatchedBracketError',
    'InputFailureError',
]
