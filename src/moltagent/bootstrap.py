"""Setup pipeline: one linear run from empty cwd to a seeded memory directory.

Stages:
    start → directory-ensured → credentials-loaded → credentials-validated
          → files-scaffolded → done

Any error moves the run to ``failed`` and propagates to the caller. There is
no rollback: files scaffolded before a failure stay on disk.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from moltagent.client import MoltMarketsClient, UserRecord
from moltagent.credentials import Credentials, load_credentials
from moltagent.memory import templates
from moltagent.memory.scaffold import ScaffoldReport, ensure_memory_dir, scaffold_files

if TYPE_CHECKING:
    from moltagent.config import AgentConfig
    from moltagent.memory.scaffold import NoticeCallback

logger = logging.getLogger(__name__)

NEXT_STEPS = """\
Next steps:
1. Create cron jobs using definitions in references/cron-definitions.md
2. Review and customize config in memory/{shared_state}
3. Monitor performance in memory/{trader_learnings} and memory/{creator_learnings}"""


class SetupStage(str, enum.Enum):
    START = "start"
    DIRECTORY_ENSURED = "directory-ensured"
    CREDENTIALS_LOADED = "credentials-loaded"
    CREDENTIALS_VALIDATED = "credentials-validated"
    FILES_SCAFFOLDED = "files-scaffolded"
    DONE = "done"
    FAILED = "failed"


@dataclass
class SetupResult:
    """Outcome of a successful setup run."""

    credentials: Credentials
    user: UserRecord
    report: ScaffoldReport


class AgentSetup:
    """Runs the setup stages in order and tracks the current one."""

    def __init__(self, config: AgentConfig, notify: NoticeCallback = print) -> None:
        self.config = config
        self.stage = SetupStage.START
        self._notify = notify

    def _advance(self, stage: SetupStage) -> None:
        logger.debug("Setup stage: %s -> %s", self.stage.value, stage.value)
        self.stage = stage

    # ── Stages ───────────────────────────────────────────────

    def _ensure_directory(self) -> None:
        if ensure_memory_dir(self.config.memory_dir):
            self._notify(f"✓ Created {self.config.memory_dir.name}/ directory")
        self._advance(SetupStage.DIRECTORY_ENSURED)

    def _load_credentials(self) -> Credentials:
        creds = load_credentials(self.config.credentials_path)
        self._notify(f"✓ Found credentials for user: {creds.username}")
        self._advance(SetupStage.CREDENTIALS_LOADED)
        return creds

    async def _validate(self, creds: Credentials) -> UserRecord:
        client = MoltMarketsClient(creds, self.config.api.base_url)
        user = await client.get_me()
        self._notify(f"✓ API key valid. Balance: {user.balance}ŧ")
        self._advance(SetupStage.CREDENTIALS_VALIDATED)
        return user

    def _scaffold(self, user: UserRecord) -> ScaffoldReport:
        files = templates.default_files(balance=user.balance)
        report = scaffold_files(self.config.memory_dir, files, notify=self._notify)
        self._advance(SetupStage.FILES_SCAFFOLDED)
        return report

    # ── Main run ─────────────────────────────────────────────

    async def run(self) -> SetupResult:
        try:
            self._ensure_directory()
            creds = self._load_credentials()
            user = await self._validate(creds)
            report = self._scaffold(user)
        except Exception:
            logger.debug("Setup failed at stage %s", self.stage.value, exc_info=True)
            self.stage = SetupStage.FAILED
            raise

        self._advance(SetupStage.DONE)
        self._notify("\n✅ Setup complete!")
        self._notify(
            "\n"
            + NEXT_STEPS.format(
                shared_state=templates.SHARED_STATE_FILE,
                trader_learnings=templates.TRADER_LEARNINGS_FILE,
                creator_learnings=templates.CREATOR_LEARNINGS_FILE,
            )
        )
        return SetupResult(credentials=creds, user=user, report=report)


async def run_setup(config: AgentConfig, notify: NoticeCallback = print) -> SetupResult:
    """Run the full setup pipeline once."""
    return await AgentSetup(config, notify=notify).run()
