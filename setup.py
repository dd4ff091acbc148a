from setuptools import setup, find_packages
from pathlib import Path

# Read the requirements from requirements.txt
reqs_path = Path(__file__).parent / "requirements.txt"
requirements = [
    line.strip()
    for line in reqs_path.read_text().splitlines()
    if line.strip() and not line.startswith("#")
]

setup(
    name="commit-log-check",
    version="1.0.0",
    description="Checks that commits in a git log dump have an author and a sign-off",
    packages=find_packages(include=["commitlog", "commitlog.*"]),
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "find-missing-developers=commitlog.cli:run",
        ],
    },
)
