"""Upload batch state machine.

    IDLE -> UPLOADING(i/n) -> COMPLETED | FAILED(at index)

States are immutable; ``start`` and ``step`` derive each new state from the
previous one and a single file outcome.
"""

from enum import StrEnum

from astrohub.domain.catalog.model.entity import Asset
from astrohub.domain.shared.error import InvalidStateError
from astrohub.domain.shared.model.value import ValueObject


class UploadPhase(StrEnum):
    IDLE = "idle"
    UPLOADING = "uploading"
    COMPLETED = "completed"
    FAILED = "failed"


class FileUploaded(ValueObject):
    asset: Asset


class FileFailed(ValueObject):
    message: str


FileOutcome = FileUploaded | FileFailed


class UploadState(ValueObject):
    phase: UploadPhase = UploadPhase.IDLE
    total: int = 0
    completed: int = 0
    assets: tuple[Asset, ...] = ()
    failed_index: int | None = None
    error: str | None = None

    @property
    def progress(self) -> float:
        """Fraction of files uploaded, in [0, 1]. An empty completed batch is 1.0."""
        if self.total == 0:
            return 1.0 if self.phase == UploadPhase.COMPLETED else 0.0
        return self.completed / self.total

    @property
    def percent(self) -> float:
        return self.progress * 100

    @property
    def is_terminal(self) -> bool:
        return self.phase in (UploadPhase.COMPLETED, UploadPhase.FAILED)


def start(total: int) -> UploadState:
    """Begin a batch of ``total`` files. An empty batch completes immediately."""
    if total < 0:
        raise ValueError("total must be >= 0")
    phase = UploadPhase.UPLOADING if total else UploadPhase.COMPLETED
    return UploadState(phase=phase, total=total)


def step(state: UploadState, outcome: FileOutcome) -> UploadState:
    """Apply the outcome of the next file in the batch."""
    if state.phase != UploadPhase.UPLOADING:
        raise InvalidStateError(f"Cannot apply file outcome in {state.phase} state")

    if isinstance(outcome, FileFailed):
        return state.model_copy(
            update={
                "phase": UploadPhase.FAILED,
                "failed_index": state.completed,
                "error": outcome.message,
            }
        )

    completed = state.completed + 1
    return state.model_copy(
        update={
            "phase": UploadPhase.COMPLETED if completed == state.total else UploadPhase.UPLOADING,
            "completed": completed,
            "assets": (*state.assets, outcome.asset),
        }
    )
