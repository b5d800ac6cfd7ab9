#!/usr/bin/env python3
"""Setup script for DragStage."""

from setuptools import setup, find_packages

setup(
    name="dragstage",
    version="1.0.0",
    description="Drag rectangles around a 2D stage: scene graph, hit testing and pointer drag",
    author="DragStage Project",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "PyGObject>=3.46.0",
        "pycairo>=1.25.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "dragstage=dragstage.launcher:main",
        ],
        "gui_scripts": [
            "dragstage-gui=dragstage.launcher:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: X11 Applications :: GTK",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Graphics",
    ],
)
