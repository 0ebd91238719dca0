from .dispatch import DispatchTable, GuardedUnit, build_dispatch_table, state_after
from .keymap import DEFAULT_KEYMAP, map_key, response_keys
from .rounds import RoundController
from .session import CombatSession, PendingStep
from .transitions import TRANSITIONS, Choice, Fixed, is_modeled, possible_results, transition

__all__ = [
    "CombatSession",
    "PendingStep",
    "RoundController",
    "DispatchTable",
    "GuardedUnit",
    "build_dispatch_table",
    "state_after",
    "DEFAULT_KEYMAP",
    "map_key",
    "response_keys",
    "TRANSITIONS",
    "Fixed",
    "Choice",
    "is_modeled",
    "possible_results",
    "transition",
]
