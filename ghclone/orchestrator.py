"""
Concurrent clone orchestration.

Clones every repository of an enumeration result into its own subdirectory
of a fresh destination root, one asyncio task per repository. A failing
clone is recorded in the report and never cancels its siblings.
"""

import asyncio
from collections.abc import Callable, Sequence
from pathlib import Path

from ghclone.exceptions import (
    CloneError,
    DestinationCreateError,
    DestinationExistsError,
)
from ghclone.git import GitHelper
from ghclone.logging import get_logger
from ghclone.types.clones import CloneOutcome, CloneReport, CloneStatus
from ghclone.types.repos import RepositoryRef

logger = get_logger("clone")

ProgressCallback = Callable[[int, int, CloneOutcome], None]


def prepare_destination(root: Path) -> None:
    """
    Create a fresh destination root.

    Raises:
        DestinationExistsError: If ``root`` already exists
        DestinationCreateError: If ``root`` cannot be created
    """
    if root.exists():
        raise DestinationExistsError(root)

    try:
        root.mkdir(parents=True)
    except OSError as e:
        raise DestinationCreateError(root, e.strerror or str(e)) from e


def _is_safe_name(name: str) -> bool:
    return bool(name) and name not in (".", "..") and "/" not in name and "\\" not in name


class CloneOrchestrator:
    """
    Clones a list of repositories concurrently.

    Example:
        ```python
        import asyncio
        from ghclone.orchestrator import CloneOrchestrator

        def show(done, total, outcome):
            print(f"[{done}/{total}] {outcome.ref.name}: {outcome.status.value}")

        orchestrator = CloneOrchestrator(on_progress=show)
        report = asyncio.run(orchestrator.clone_all(refs, "./octo"))
        ```
    """

    def __init__(
        self,
        git: GitHelper | None = None,
        max_concurrency: int | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            git: Clone capability (default: GitHelper using the git executable)
            max_concurrency: Optional cap on simultaneous clones (default: unbounded)
            on_progress: Called as ``on_progress(completed, total, outcome)`` after
                each clone finishes
        """
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")

        self.git = git or GitHelper()
        self.max_concurrency = max_concurrency
        self.on_progress = on_progress

    async def clone_all(
        self, refs: Sequence[RepositoryRef], destination_root: str | Path
    ) -> CloneReport:
        """
        Clone every ref into ``destination_root / ref.name``.

        The destination root is validated and created before any clone
        starts. All clone tasks are awaited before the report is returned.

        Args:
            refs: Repositories to clone
            destination_root: Directory that must not exist yet

        Returns:
            CloneReport with one outcome per ref, in the order of ``refs``

        Raises:
            DestinationExistsError: If the destination root already exists
            DestinationCreateError: If the destination root cannot be created
        """
        root = Path(destination_root)
        prepare_destination(root)

        total = len(refs)
        logger.info("Cloning %d repositories into %s", total, root)

        queue: asyncio.Queue[CloneOutcome | None] = asyncio.Queue()
        reporter = asyncio.create_task(self._report_progress(queue, total))
        semaphore = (
            asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None
        )

        try:
            outcomes = await asyncio.gather(
                *(self._clone_one(ref, root, queue, semaphore) for ref in refs)
            )
        finally:
            # Sentinel: no more outcomes will be published
            await queue.put(None)
            await reporter

        report = CloneReport(destination=root, outcomes=list(outcomes))
        logger.info(
            "Cloned %d of %d repositories (%d failed)",
            len(report.succeeded),
            total,
            len(report.failed),
        )
        return report

    async def _clone_one(
        self,
        ref: RepositoryRef,
        root: Path,
        queue: "asyncio.Queue[CloneOutcome | None]",
        semaphore: asyncio.Semaphore | None,
    ) -> CloneOutcome:
        path = root / ref.name

        if not _is_safe_name(ref.name):
            outcome = CloneOutcome(
                ref, CloneStatus.FAILURE, path, f"unsafe repository name: {ref.name!r}"
            )
        elif semaphore is None:
            outcome = await self._run_clone(ref, path)
        else:
            async with semaphore:
                outcome = await self._run_clone(ref, path)

        await queue.put(outcome)
        return outcome

    async def _run_clone(self, ref: RepositoryRef, path: Path) -> CloneOutcome:
        try:
            await self.git.async_clone(ref.clone_url, path)
        except CloneError as e:
            logger.warning("Failed to clone %s: %s", ref.name, e.message)
            return CloneOutcome(ref, CloneStatus.FAILURE, path, e.message)
        except OSError as e:
            logger.warning("Failed to clone %s: %s", ref.name, e)
            return CloneOutcome(ref, CloneStatus.FAILURE, path, str(e))
        except Exception as e:
            # Any other capability error still only fails this repository
            logger.warning("Failed to clone %s: %r", ref.name, e)
            return CloneOutcome(
                ref, CloneStatus.FAILURE, path, str(e) or type(e).__name__
            )

        return CloneOutcome(ref, CloneStatus.SUCCESS, path)

    async def _report_progress(
        self, queue: "asyncio.Queue[CloneOutcome | None]", total: int
    ) -> None:
        """Single consumer of finished outcomes; owns the progress counter."""
        completed = 0
        while True:
            outcome = await queue.get()
            if outcome is None:
                return

            completed += 1
            logger.debug("[%d/%d] %s: %s", completed, total, outcome.ref.name, outcome.status.value)
            if self.on_progress is not None:
                try:
                    self.on_progress(completed, total, outcome)
                except Exception:
                    logger.exception("Progress callback failed for %s", outcome.ref.name)
