import shutil
from pathlib import Path
import tempfile
import pytest


@pytest.fixture(scope="session", autouse=True)
def isolate_home_config():
    """Temporarily move any existing user-level pr_grouper config out of the way.

    Tests expect built-in defaults unless they provide a config file
    themselves. The file is restored after the session.
    """
    config_path = Path.home() / ".pr_grouper" / ".pr_grouper_config.json"
    backup_dir = None
    moved = False
    if config_path.exists():
        backup_dir = Path(tempfile.mkdtemp(prefix="pr_grouper_backup_"))
        shutil.move(str(config_path), str(backup_dir / config_path.name))
        moved = True

    try:
        yield
    finally:
        if moved and backup_dir is not None:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(backup_dir / config_path.name), str(config_path))
            shutil.rmtree(str(backup_dir), ignore_errors=True)
