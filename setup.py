"""setup for FocusRounds.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup, find_packages

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,  # Replace with .icns path when a proper icon exists
    "plist": {
        "CFBundleName": "FocusRounds",
        "CFBundleDisplayName": "FocusRounds",
        "CFBundleIdentifier": "com.focusrounds.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
        "LSUIElement": True,  # menu-bar app, no Dock icon
    },
}

# py2app is macOS-only; only pull it in when building the bundle.
py2app_kwargs = {}
if "py2app" in sys.argv:
    py2app_kwargs = {
        "app": APP,
        "data_files": DATA_FILES,
        "options": {"py2app": OPTIONS},
        "setup_requires": ["py2app"],
    }

setup(
    name="FocusRounds",
    version="0.1.0",
    packages=find_packages(include=["focusrounds", "focusrounds.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6>=6.4"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"gui_scripts": ["focusrounds = focusrounds.__main__:main"]},
    **py2app_kwargs,
)
