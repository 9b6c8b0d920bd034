from __future__ import annotations

import logging

from designqube.application.container import build_container
from designqube.config import get_app_paths
from designqube.logging_config import setup_logging
from designqube.ui.app import App


def main() -> None:
    paths = get_app_paths()
    setup_logging(paths.logs_dir, level=logging.INFO)

    container = build_container(paths.store_path)

    app = App(
        ledger=container.ledger,
        excel_service=container.excel,
        reporting_service=container.reporting,
        store_path=str(paths.store_path),
        logs_dir=str(paths.logs_dir),
    )
    app.mainloop()


if __name__ == "__main__":
    main()
