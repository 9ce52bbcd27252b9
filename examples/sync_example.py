"""Example script showing how to run a synchronisation programmatically."""
from __future__ import annotations

from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from abbs_l10n import SyncRunner  # type: ignore  # noqa: E402
from abbs_l10n.utils import configure_logging, load_config  # type: ignore  # noqa: E402


def main() -> None:
    configure_logging("DEBUG")
    config = load_config(Path("sync.yml"))
    report = SyncRunner(config, start=Path.cwd()).run(sys.argv[1:] or None)
    print(report.model_dump_json(indent=2))
    sys.exit(0 if report.succeeded else 1)


if __name__ == "__main__":
    main()
