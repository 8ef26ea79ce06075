"""Setup script for oxysound."""

from setuptools import setup, find_namespace_packages

setup(
    name="oxysound",
    version="0.1.0",
    description="Build YouTube playlists from video IDs and keep them as JSON files",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "google-api-python-client>=2.0.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0,<9",
        ]
    },
    entry_points={
        "console_scripts": [
            "oxysound=oxysound.cli:main",
        ]
    },
)
