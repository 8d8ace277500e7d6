import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import logfire

from astrohub.domain.catalog.model.entity import Asset
from astrohub.domain.catalog.model.payload import MissionRef, UploadFile
from astrohub.domain.shared.error import ClientError, UploadBatchError
from astrohub.domain.shared.model.value import ValueObject
from astrohub.domain.upload.model.state import (
    FileFailed,
    FileUploaded,
    UploadState,
    start,
    step,
)
from astrohub.domain.upload.port.uploader import AssetUploader

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[UploadState], None]


class UploadResult(ValueObject):
    assets: list[Asset]

    @property
    def count(self) -> int:
        return len(self.assets)


@dataclass(frozen=True)
class UploadOrchestrator:
    """Uploads a batch of files to one mission, strictly one after another.

    The batch is all-or-first-failure: the first failing file aborts the
    rest. Files uploaded before the failure stay on the backend.
    """

    uploader: AssetUploader

    async def upload_batch(
        self,
        mission: MissionRef,
        files: Sequence[UploadFile],
        on_progress: ProgressCallback | None = None,
    ) -> UploadResult:
        """Upload ``files`` in order, reporting every state transition.

        ``on_progress`` first receives the starting state (0/n, or the
        completed state for an empty batch), then one state per file.

        Raises:
            UploadBatchError: A file failed; carries its index and the assets
                uploaded before it.
        """
        state = start(len(files))
        _report(on_progress, state)

        with logfire.span(
            "UploadBatch",
            organization=mission.organization,
            project=mission.project,
            mission=mission.mission,
            total=len(files),
        ):
            logger.info(
                "Uploading %d file(s) to %s/%s/%s",
                len(files),
                mission.organization,
                mission.project,
                mission.mission,
            )
            for index, file in enumerate(files):
                try:
                    with logfire.span("UploadAsset", filename=file.name, size=file.size):
                        asset = await self.uploader.upload(
                            mission.organization, mission.project, mission.mission, file
                        )
                except ClientError as e:
                    state = step(state, FileFailed(message=e.message))
                    _report(on_progress, state)
                    logger.warning(
                        "Upload of %s failed at %d/%d: %s", file.name, index + 1, len(files), e.message
                    )
                    raise UploadBatchError(
                        f"Failed to upload '{file.name}': {e.message}",
                        failed_index=index,
                        uploaded=list(state.assets),
                        cause=e,
                    ) from e

                state = step(state, FileUploaded(asset=asset))
                _report(on_progress, state)
                logger.info("Uploaded %s as asset %s (%d/%d)", file.name, asset.id, index + 1, len(files))

        return UploadResult(assets=list(state.assets))


def _report(on_progress: ProgressCallback | None, state: UploadState) -> None:
    if on_progress is not None:
        on_progress(state)
