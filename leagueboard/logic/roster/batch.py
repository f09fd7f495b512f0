import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from leagueboard.models.roster import BatchOutcome, OperationDescriptor, OperationOutcome
from leagueboard.utils.logging import logger

# Returns the response data on success and None on failure
Sender = Callable[[OperationDescriptor], Awaitable[dict[str, Any] | None]]


async def _settle(send: Sender, descriptor: OperationDescriptor) -> OperationOutcome:
    try:
        data = await send(descriptor)
    except Exception as exc:
        logger.warning(f"{descriptor.verb.value} {descriptor.path} raised: {exc!r}")
        return OperationOutcome(descriptor=descriptor, success=False)

    if data is None:
        logger.warning(f"{descriptor.verb.value} {descriptor.path} failed")
        return OperationOutcome(descriptor=descriptor, success=False)

    return OperationOutcome(descriptor=descriptor, success=True, data=data)


async def execute_batch(descriptors: Sequence[OperationDescriptor], send: Sender) -> BatchOutcome:
    """
    Dispatch all operations at once and wait until every one of them has settled.

    A failing operation does not cancel its siblings, and nothing is retried. Failures are
    absorbed here: callers only see which operations succeeded.
    """
    if len(descriptors) == 0:
        return BatchOutcome()

    outcomes = await asyncio.gather(*[_settle(send, descriptor) for descriptor in descriptors])
    batch = BatchOutcome(outcomes=list(outcomes))

    if not batch.all_succeeded:
        logger.warning(f"{len(batch.failed)} of {len(descriptors)} roster operations failed")

    return batch
