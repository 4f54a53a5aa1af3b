"""
Input State - The held/released state of the two paddle controls.

Read once per frame by the controller.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class InputState:
    """Immutable snapshot of the paddle controls.

    Attributes:
        left: Left control is held
        right: Right control is held
    """
    left: bool = False
    right: bool = False

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"InputState(left={self.left}, right={self.right})"


NO_INPUT = InputState()
