"""Typed inputs for the DevSpace tool catalog."""

from .schemas import (
    DevSpaceAddInput,
    DevSpaceBuildInput,
    DevSpaceDeployInput,
    DevSpaceDevInput,
    DevSpaceEnterInput,
    DevSpaceInitInput,
    DevSpaceInput,
    DevSpaceListInput,
    DevSpaceLogsInput,
    DevSpacePrintInput,
    DevSpaceRemoveInput,
    DevSpaceResetInput,
    DevSpaceRunInput,
    DevSpaceSetInput,
    DevSpaceUIInput,
    DevSpaceUseInput,
)

__all__ = [
    'DevSpaceAddInput',
    'DevSpaceBuildInput',
    'DevSpaceDeployInput',
    'DevSpaceDevInput',
    'DevSpaceEnterInput',
    'DevSpaceInitInput',
    'DevSpaceInput',
    'DevSpaceListInput',
    'DevSpaceLogsInput',
    'DevSpacePrintInput',
    'DevSpaceRemoveInput',
    'DevSpaceResetInput',
    'DevSpaceRunInput',
    'DevSpaceSetInput',
    'DevSpaceUIInput',
    'DevSpaceUseInput',
]
