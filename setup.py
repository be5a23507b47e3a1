"""
Setup script for the cribbage-client package.

Public API lives in the top-level modules (client.py, errors.py,
types.py, cli.py); the engine internals live in the _game and _shared
subpackages.
"""

from setuptools import setup, find_packages

setup(
    name="cribbage-client",
    version="0.1.0",
    description="Cribbage game session client - shadow state, action legality and snapshot reconciliation",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "requests>=2.31.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "cribbage-client=cribbage_client.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment",
    ],
)
