"""Setup for MyFitness.

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
        "CFBundleName": "MyFitness",
        "CFBundleDisplayName": "MyFitness",
        "CFBundleIdentifier": "com.example.myfitness",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

bundle_kwargs = {}
if "py2app" in sys.argv:
    bundle_kwargs = {
        "app": APP,
        "data_files": DATA_FILES,
        "options": {"py2app": OPTIONS},
    }

setup(
    name="MyFitness",
    version="0.1.0",
    packages=find_packages(include=["myfitness", "myfitness.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.4",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "gui_scripts": ["myfitness = myfitness.__main__:main"],
    },
    **bundle_kwargs,
)
