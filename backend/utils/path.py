import sys
from pathlib import Path

from configs.env import PROJECT_ROOT


def app_path(*sub_paths):
    """Get absolute path to a resource shipped next to the backend packages."""
    # PyInstaller creates a temp folder and stores path in _MEIPASS.
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):  # Check if running as a compiled app
        base_path = Path(sys._MEIPASS)
    else:
        base_path = PROJECT_ROOT
    return str(base_path.joinpath(*sub_paths))
