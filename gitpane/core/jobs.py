"""Fire-and-forget command jobs.

A job is a zero-argument callable that runs one git command and never
raises: every outcome is folded into a JobResult that the host hands back to
the UI thread.
"""

import logging

from gitpane.domain.entities import JobResult
from gitpane.ports.host import Job, JobCallback
from gitpane.ports.vcs import VCS, GitCommandError, GitError

logger = logging.getLogger(__name__)


def command_job(runner: VCS, *args: str) -> Job:
    """Build a job running ``git <args>`` with the given runner.

    Args:
        runner: Runner providing cwd and executable.
        *args: Git arguments.

    Returns:
        Callable returning a JobResult.
    """

    def job() -> JobResult:
        try:
            stdout = runner.run(*args)
        except GitCommandError as e:
            return JobResult(
                success=False,
                stderr=e.stderr or e.message,
                exit_status=e.exit_status,
            )
        except GitError as e:
            return JobResult(success=False, stderr=e.message, exit_status=None)
        except OSError as e:
            logger.debug("git %s could not be started: %s", " ".join(args), e)
            return JobResult(success=False, stderr=str(e), exit_status=None)
        return JobResult(success=True, stdout=stdout)

    return job


class SyncJobRunner:
    """Runs jobs inline and completes them immediately.

    Used where there is no event loop to hand results back to, such as the
    CLI and tests.
    """

    def run_job(self, job: Job, on_complete: JobCallback) -> None:
        on_complete(job())
