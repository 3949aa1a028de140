"""
Duration audit.

Recomputes every cached ``duration_min`` of a user under the currently
configured time zone and prints the rows that no longer agree.  Rows are
never rewritten.

Usage:
    python scripts/audit_durations.py <user_id>
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlmodel import Session

from app.core.config import settings
from app.core.logging import configure_logging
from app.db.session import engine
from app.services.settings_service import SettingsService
from app.services.sleep_session_service import SleepSessionService


def main(user_id: int) -> int:
    with Session(engine) as session:
        zone = SettingsService(session, settings.DEFAULT_TIMEZONE).get_zone()
        report = SleepSessionService(session, zone).audit_durations(user_id)

    print("=" * 60)
    print(f"Duration audit for user {user_id} ({report.timezone}, {zone.source.value})")
    print("=" * 60)
    print(f"Sessions checked: {report.checked}")
    print(f"Drifted:          {len(report.drifted)}")
    for d in report.drifted:
        recomputed = "invalid" if d.recomputed_duration_min is None else d.recomputed_duration_min
        print(f"  #{d.session_id:<6} {d.wake_date}  cached={d.cached_duration_min:<5} "
              f"recomputed={recomputed:<7} frozen_tz={d.cached_timezone}")
    return 1 if report.drifted else 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    configure_logging(settings.LOG_LEVEL, json_logs=False)
    sys.exit(main(int(sys.argv[1])))
