#!/usr/bin/env python3
"""
Basic ghclone usage example.

Lists the repositories of an account, then clones them concurrently into
./<account>. Set GITHUB_TOKEN to raise the API rate limit.
Run with: python examples/basic_usage.py octocat
"""

import asyncio
import logging
import sys

from ghclone import (
    AsyncGitHubClient,
    CloneOrchestrator,
    GhCloneError,
    GitHelper,
    configure_logging,
)


def show_progress(completed, total, outcome):
    status = "ok" if outcome.succeeded else f"failed: {outcome.reason}"
    print(f"   [{completed}/{total}] {outcome.ref.name} {status}")


async def main(account: str) -> int:
    print(f"=== ghclone: {account} ===\n")

    # 1. Enumerate every page of the account's listing
    print("1. Listing repositories...")
    async with AsyncGitHubClient.from_env() as client:
        refs = await client.repos.enumerate(account)

    for ref in refs:
        print(f"   {ref.name:<40} {ref.clone_url}")
    print(f"   {len(refs)} repositories\n")

    # 2. Clone them, at most four at a time
    print("2. Cloning...")
    orchestrator = CloneOrchestrator(
        git=GitHelper(depth=1),
        max_concurrency=4,
        on_progress=show_progress,
    )
    report = await orchestrator.clone_all(refs, f"./{account}")

    print(f"\n   Cloned {len(report.succeeded)} of {len(report.outcomes)} into {report.destination}")
    return 0 if report.ok else 2


if __name__ == "__main__":
    configure_logging(level=logging.WARNING)
    try:
        sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "octocat")))
    except GhCloneError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Code: {e.code}, Message: {e.message}", file=sys.stderr)
        sys.exit(1)
