import logging
import threading
from typing import Any, Dict

from bridgit.graph import apply_action
from bridgit.state import OnboardingState

logger = logging.getLogger(__name__)


class Session:
    """Owns the one OnboardingState of the running process.

    Reads return the current value; every write goes through ``dispatch`` and
    runs the action graph under a lock, so screens never race each other.
    A failed action leaves the committed state untouched.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = OnboardingState()

    @property
    def state(self) -> OnboardingState:
        return self._state

    def restart(self) -> OnboardingState:
        with self._lock:
            state = self._state = OnboardingState()
        logger.info("Started a new onboarding session")
        return state

    def dispatch(self, action: Dict[str, Any]) -> OnboardingState:
        with self._lock:
            try:
                self._state = apply_action(self._state, action)
            except ValueError as exc:
                logger.warning("Rejected %s: %s", action.get("kind"), exc)
                raise
            return self._state
