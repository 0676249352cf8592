"""Setup configuration for the puzzle-pattern package."""

from setuptools import find_packages, setup

setup(
    name="puzzle-pattern",
    version="0.1.0",
    packages=find_packages(include=["puzzle_pattern", "puzzle_pattern.*"]),
    install_requires=[
        "fastapi",
        "uvicorn",
        "numpy",
        "pydantic",
        "pydantic-settings",
        "svgwrite",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "httpx",
            "black",
            "flake8",
            "mypy",
            "isort",
        ],
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
